"""
Menu tree and per-request menu evaluation.

A :class:`Menu` is built once at startup from configuration records (see
``menuable.loader``). Each record becomes one node:

- ``{"divider": true}``             → :class:`Divider`
- ``{"name": ..., "items": [...]}`` → :class:`Group` of :class:`Item` nodes
- ``{"name": ...}``                 → :class:`Item`

Item names are looked up in the handler registry (prefixed with the menu's
namespace), so ``name: reports/sales`` under the ``admin`` namespace links
to the handler declared with ``@menu("admin/reports/sales")``. Names that
resolve to nothing become plain path/label entries.

Calling the menu with a request context returns a :class:`MenuContext`, a
restartable iterable of the entries that request may see, each annotated
with ``active`` and its resolved ``path``.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from django.conf import settings

from .definition import split_identifier
from .exceptions import MenuConfigurationError
from .loader import load_menu_config
from .registry import handlers as default_registry
from .routing import Router

logger = logging.getLogger(__name__)

DEFAULT_MAX_NAMESPACE_DEPTH = 3


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Divider:
    """A separator between entries."""
    name: Optional[str] = None

    def as_dict(self):
        return {"type": "divider", "name": self.name}


@dataclass(frozen=True)
class Item:
    """A navigable entry."""
    name: str
    label: str
    path: Optional[str] = None
    loyalty: Optional[str] = None
    handler: Any = None
    namespace: tuple = ()
    icon: Optional[str] = None
    active: bool = False

    def as_dict(self):
        return {
            "type": "item",
            "name": self.name,
            "label": self.label,
            "path": self.path,
            "loyalty": self.loyalty,
            "namespace": self.namespace,
            "icon": self.icon,
            "active": self.active,
        }


@dataclass(frozen=True)
class Group:
    """A labelled set of items (rendered as a dropdown or a section)."""
    name: str
    label: str
    items: tuple = ()
    loyalty: Optional[str] = None
    icon: Optional[str] = None
    active: bool = False

    def as_dict(self):
        return {
            "type": "group",
            "name": self.name,
            "label": self.label,
            "items": tuple(item.as_dict() for item in self.items),
            "loyalty": self.loyalty,
            "icon": self.icon,
            "active": self.active,
        }


# ---------------------------------------------------------------------------
# Menu tree
# ---------------------------------------------------------------------------


class Menu:
    # Templates must receive the menu itself, not the result of calling it.
    do_not_call_in_templates = True

    def __init__(self, records, namespace="", *, registry=None, max_depth=None):
        self.namespace = split_identifier(namespace or "")
        self.registry = default_registry if registry is None else registry
        if max_depth is None:
            max_depth = getattr(settings, "MENUABLE_MAX_NAMESPACE_DEPTH", DEFAULT_MAX_NAMESPACE_DEPTH)
        self.max_depth = max_depth

        self._handlers = []
        self._index = {}
        self._menus = tuple(self._build(record) for record in records)

    @classmethod
    def from_file(cls, path, namespace="", **kwargs):
        return cls(load_menu_config(path), namespace, **kwargs)

    # -- building --

    def _build(self, record):
        if not isinstance(record, dict):
            raise MenuConfigurationError(f"Menu entries must be mappings, got {record!r}")
        if "divider" in record:
            return Divider(name=record.get("name"))

        items = record.get("items")
        if items is None:
            return self._item(record)
        if not isinstance(items, (list, tuple)):
            raise MenuConfigurationError(
                f"Menu group {record.get('name')!r}: 'items' must be a list"
            )

        name = self._name(record)
        # A group can still name a handler; it is routed but does not gate the group.
        self._resolve(name)
        children = []
        for child in items:
            if not isinstance(child, dict) or "items" in child or "divider" in child:
                raise MenuConfigurationError(
                    f"Menu group {name!r} may only contain plain items, got {child!r}"
                )
            children.append(self._item(child))
        return Group(
            name=name,
            label=record.get("label") or name,
            items=tuple(children),
            loyalty=record.get("loyalty"),
            icon=record.get("icon"),
        )

    def _item(self, record):
        name = self._name(record)
        handler, namespace = self._resolve(name)
        return Item(
            name=name,
            label=record.get("label") or name,
            path=record.get("path"),
            loyalty=record.get("loyalty"),
            handler=handler,
            namespace=namespace,
            icon=record.get("icon"),
        )

    @staticmethod
    def _name(record):
        name = record.get("name")
        if not name:
            raise MenuConfigurationError(f"Menu entry is missing a 'name': {record!r}")
        return str(name)

    def _resolve(self, name):
        segments = self.namespace + split_identifier(name)
        namespace = segments[:-1]
        handler = self.registry.get("/".join(segments))
        if handler is None:
            logger.debug("No menu handler registered for %r", "/".join(segments))
            return None, namespace
        if len(namespace) > self.max_depth:
            raise MenuConfigurationError(
                f"Menu handler {'/'.join(segments)!r} is nested {len(namespace)} namespaces "
                f"deep; at most {self.max_depth} are supported"
            )
        if handler not in self._handlers:
            self._handlers.append(handler)
            self._index.setdefault(namespace, []).append(handler)
        return handler, namespace

    # -- queries --

    def all(self):
        return self._menus

    @property
    def handlers(self):
        return tuple(self._handlers)

    @property
    def index(self):
        """Handlers grouped by namespace path, in registration order."""
        return {namespace: tuple(group) for namespace, group in self._index.items()}

    def call(self, context):
        return MenuContext(menus=self._menus, context=context)

    __call__ = call

    def first(self, current_user):
        """Return the definition of the first handler *current_user* may use."""
        for handler in self._handlers:
            if handler.menu.approves(current_user):
                return handler.menu
        return None

    # -- routing --

    def routes(self, router):
        tree = {}
        for namespace, group in self._index.items():
            node = tree
            for segment in namespace:
                node = node.setdefault("children", {}).setdefault(segment, {})
            node.setdefault("handlers", []).extend(group)
        self._emit(router, tree)
        return router

    def _emit(self, router, node):
        # Nested namespaces go first so a sibling's detail route cannot capture them.
        for segment, child in node.get("children", {}).items():
            with router.namespace(segment):
                self._emit(router, child)
        for handler in node.get("handlers", ()):
            self._declare(router, handler)

    @staticmethod
    def _declare(router, handler):
        definition = handler.menu
        declare = router.resource if definition.single else router.resources
        with declare(definition.resource_name, handler, **definition.options) as scope:
            if definition.member_actions:
                scope.member(*definition.member_actions)
            if definition.actions is not None:
                definition.actions(scope)

    @property
    def urls(self):
        return self.routes(Router()).urls


# ---------------------------------------------------------------------------
# Per-request evaluation
# ---------------------------------------------------------------------------


class MenuContext:
    """The menu as seen by one request.

    Iterating yields approved nodes in configuration order; it can be
    iterated any number of times.
    """

    def __init__(self, menus, context):
        self.menus = menus
        self.context = context

    def each(self, callback=None):
        if callback is None:
            return self._entries()
        for entry in self._entries():
            callback(entry)
        return None

    def __iter__(self):
        return self._entries()

    def _entries(self):
        for node in self.menus:
            if isinstance(node, Divider):
                yield node
            elif isinstance(node, Group):
                items = tuple(
                    entry for entry in (self._menu(item) for item in node.items)
                    if entry is not None
                )
                group = self._menu(replace(node, items=items))
                if group is not None:
                    yield group
            else:
                entry = self._menu(node)
                if entry is not None:
                    yield entry

    def _menu(self, node):
        if not self.approved(node):
            return None
        if isinstance(node, Group):
            return replace(node, active=self.active(node))
        path = self.path(node)
        return replace(node, path=path, active=self._matches(path))

    def approved(self, node):
        if getattr(node, "loyalty", None):
            return bool(self.context.check(node.loyalty))
        handler = getattr(node, "handler", None)
        if handler is not None:
            return handler.menu.approves(self.context.current_user)
        return True

    def path(self, node):
        resolved = None
        if node.handler is not None:
            resolved = self.context.url_for(node.handler.menu)
        return resolved or node.path or "/"

    def active(self, node):
        if isinstance(node, Group):
            return any(self._matches(self.path(item)) for item in node.items)
        return self._matches(self.path(node))

    def _matches(self, path):
        # Prefix match on whole segments: "/admin/" covers "/admin/users", not "/adminx".
        if path.endswith("/"):
            path = path[:-1]
        current = self.context.request.path
        return current == path or current.startswith(path + "/")


__all__ = [
    "Divider",
    "Group",
    "Item",
    "Menu",
    "MenuContext",
]
