from django import template
from django.urls import reverse

from menuable.conf import get_menu
from menuable.context import MenuRequestContext
from menuable.definition import MenuDefinition

register = template.Library()


@register.simple_tag(takes_context=True)
def menu_entries(context, menu=None):
    """
    Evaluate a menu for the request in the template context.

    Usage::

        {% menu_entries as entries %}
        {% for entry in entries %}...{% endfor %}

    Without a ``menu`` argument the project menu (``MENUABLE_CONFIG``) is
    used. Returns an empty tuple when there is no request in the context.
    """
    request = context.get("request")
    if not request:
        return ()
    menu = menu if menu is not None else get_menu()
    return tuple(menu(MenuRequestContext(request)))


@register.filter
def active_class(entry, css_class="active"):
    """Return *css_class* for active entries, "" otherwise."""
    return css_class if getattr(entry, "active", False) else ""


@register.filter
def menu_type(entry):
    """Return "divider", "group" or "item" so templates can branch on it."""
    return entry.as_dict()["type"]


@register.simple_tag
def menu_url(entry, action="list", *args, **kwargs):
    """
    Reverse an action route of the handler behind a menu entry.

    ``entry`` is an evaluated item or a handler's ``MenuDefinition``::

        {% menu_url entry "activate" pk=user.pk %}

    Returns "" for entries without a handler.
    """
    definition = entry if isinstance(entry, MenuDefinition) else None
    if definition is None:
        handler = getattr(entry, "handler", None)
        if handler is None:
            return ""
        definition = handler.menu
    return reverse(definition.url_name(action), args=args or None, kwargs=kwargs or None)
