from .handlers import build_menu

urlpatterns = build_menu().urls
