"""Views shipped with menuable."""

import logging

from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect
from django.urls import reverse
from django_htmx.http import HttpResponseClientRedirect

from .conf import get_menu

logger = logging.getLogger(__name__)


def first_accessible(request, menu=None):
    """Redirect to the landing page of the first handler the user may use.

    Intended as the project's root view. For HTMX requests an ``HX-Redirect``
    is sent so the browser performs a full navigation.
    """
    menu = menu if menu is not None else get_menu()
    definition = menu.first(getattr(request, "user", None))
    if definition is None:
        logger.warning("No accessible menu entry for user %s", getattr(request, "user", None))
        raise PermissionDenied

    url = reverse(definition.route_name)
    if getattr(request, "htmx", False):
        return HttpResponseClientRedirect(url)
    return redirect(url)
