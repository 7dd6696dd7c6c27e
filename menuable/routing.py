"""
Router handle used to emit Django URL patterns for menu handlers.

The router mirrors the usual "namespace / resources / member" vocabulary on
top of ``django.urls.path`` and ``include``::

    router = Router()
    with router.namespace("admin"):
        with router.resources("users", UsersView) as scope:
            scope.member("activate")
            scope.collection("export")
    urlpatterns = router.urls

produces::

    admin/users/                  name="admin:users_list"
    admin/users/export/           name="admin:users_export"
    admin/users/<str:pk>/         name="admin:users_detail"
    admin/users/<str:pk>/activate/ name="admin:users_activate"

Every route passes an ``action`` keyword to the view so a single handler can
serve all of a resource's routes.
"""

import contextlib
import logging

from django.urls import include, path

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP = "<str:pk>"


def as_view(handler):
    """Return a callable view for a class-based or function handler."""
    if hasattr(handler, "as_view"):
        return handler.as_view()
    return handler


class ResourceScope:
    """Collects the extra routes declared for one resource."""

    def __init__(self, name, single=False):
        self.name = name
        self.single = single
        self.members = []
        self.collections = []

    def member(self, *actions):
        """Routes acting on one record (``users/<pk>/activate/``)."""
        self.members.extend(actions)

    def collection(self, *actions):
        """Routes acting on the whole resource (``users/export/``)."""
        if self.single:
            # A singular resource has no record key, so both kinds look alike.
            self.members.extend(actions)
        else:
            self.collections.extend(actions)


class Router:
    def __init__(self):
        self._scopes = [[]]

    @property
    def urls(self):
        return list(self._scopes[0])

    def _add(self, pattern):
        self._scopes[-1].append(pattern)

    @contextlib.contextmanager
    def namespace(self, name):
        """Nest everything declared inside the block under ``name/`` and ``name:``."""
        patterns = []
        self._scopes.append(patterns)
        try:
            yield self
        finally:
            self._scopes.pop()
        self._add(path(f"{name.strip('/')}/", include((patterns, name), namespace=name)))

    @contextlib.contextmanager
    def resources(self, name, handler, *, path=None, lookup=DEFAULT_LOOKUP):
        """Declare a plural resource: a list route, a detail route and extras."""
        scope = ResourceScope(name)
        yield scope

        view = as_view(handler)
        base = f"{(path or name).strip('/')}/"
        self._route(base, view, "list", f"{name}_list")
        for action in scope.collections:
            self._route(f"{base}{action}/", view, action, f"{name}_{action}")
        self._route(f"{base}{lookup}/", view, "detail", f"{name}_detail")
        for action in scope.members:
            self._route(f"{base}{lookup}/{action}/", view, action, f"{name}_{action}")

    @contextlib.contextmanager
    def resource(self, name, handler, *, path=None):
        """Declare a singular resource (``account/``, ``account/password/``)."""
        scope = ResourceScope(name, single=True)
        yield scope

        view = as_view(handler)
        base = f"{(path or name).strip('/')}/"
        self._route(base, view, "show", name)
        for action in scope.members:
            self._route(f"{base}{action}/", view, action, f"{name}_{action}")

    def _route(self, route, view, action, name):
        logger.debug("Declaring route %s (%s)", route, name)
        self._add(path(route, view, {"action": action}, name=name))


__all__ = [
    "DEFAULT_LOOKUP",
    "ResourceScope",
    "Router",
    "as_view",
]
