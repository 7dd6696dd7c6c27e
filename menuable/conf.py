"""
Settings-driven access to the project's menu.

Settings (all optional except ``MENUABLE_CONFIG``)::

    MENUABLE_CONFIG = BASE_DIR / "menu.yml"
    MENUABLE_NAMESPACE = ""
    MENUABLE_MAX_NAMESPACE_DEPTH = 3
    MENUABLE_AUTODISCOVER = "menus"

The menu is built on first use (normally from ``MenuableConfig.ready()``)
and shared read-only by every request afterwards.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .menu import Menu

_menu_cache: Menu | None = None


def get_menu() -> Menu:
    """Return the project's menu, building it on first call."""
    global _menu_cache

    if _menu_cache is None:
        path = getattr(settings, "MENUABLE_CONFIG", None)
        if not path:
            raise ImproperlyConfigured("Set MENUABLE_CONFIG to the path of the menu configuration file.")
        _menu_cache = Menu.from_file(path, getattr(settings, "MENUABLE_NAMESPACE", ""))
    return _menu_cache


def clear_menu_cache() -> None:
    """Forget the built menu.  Mainly useful in tests."""
    global _menu_cache
    _menu_cache = None
