from django.apps import AppConfig
from django.conf import settings
from django.utils.module_loading import autodiscover_modules


class MenuableConfig(AppConfig):
    name = "menuable"
    verbose_name = "Menus"

    def ready(self):
        autodiscover_modules(getattr(settings, "MENUABLE_AUTODISCOVER", "menus"))

        if getattr(settings, "MENUABLE_CONFIG", None):
            from menuable.conf import get_menu

            # Build now so configuration errors stop the process at boot.
            get_menu()
