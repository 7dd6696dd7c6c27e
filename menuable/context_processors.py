"""
Context processors for menuable.

Exposes the menu, evaluated for the current request, to templates.
"""

from menuable.conf import get_menu
from menuable.context import MenuRequestContext


def menu(request):
    """
    Add menu data to the template context.

    Returns a dictionary with a ``menu`` key containing a tuple of the nodes
    (dividers, groups and items) the current user may see, each carrying its
    resolved ``path`` and ``active`` flag.
    """
    return {
        "menu": tuple(get_menu()(MenuRequestContext(request))),
    }
