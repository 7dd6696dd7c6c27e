from django.urls import path

from menuable.conf import get_menu
from menuable.views import first_accessible

urlpatterns = [
    path("", first_accessible, name="home"),
    *get_menu().urls,
]
