"""
Registries populated at startup by the host application.

``handlers`` maps a declared identifier such as ``"admin/reports/sales"`` to
the view that serves it; ``predicates`` maps a loyalty name used in the menu
configuration (``loyalty: staff``) to a ``fn(request) -> bool``.

Usage::

    from menuable.registry import predicates

    @predicates.register("staff")
    def is_staff(request):
        return request.user.is_staff
"""

from .exceptions import AlreadyRegistered, UnregisteredPredicate


class HandlerRegistry:
    """Explicit identifier → handler mapping, kept in registration order."""

    def __init__(self):
        self._handlers = {}

    def register(self, identifier, handler):
        identifier = identifier.strip("/")
        if identifier in self._handlers and self._handlers[identifier] is not handler:
            raise AlreadyRegistered(f"A menu handler is already registered as {identifier!r}")
        self._handlers[identifier] = handler
        return handler

    def unregister(self, identifier):
        self._handlers.pop(identifier.strip("/"), None)

    def get(self, identifier):
        """Return the handler for *identifier* or ``None``."""
        return self._handlers.get(identifier.strip("/"))

    def __contains__(self, identifier):
        return identifier.strip("/") in self._handlers

    def __iter__(self):
        return iter(self._handlers.items())

    def __len__(self):
        return len(self._handlers)


class PredicateRegistry:
    """Explicit name → boolean function mapping used for ``loyalty`` keys."""

    def __init__(self):
        self._predicates = {}

    def register(self, name, func=None):
        """Register *func* under *name*. Works as a decorator when *func* is omitted."""
        if func is None:
            return lambda f: self.register(name, f)
        if name in self._predicates and self._predicates[name] is not func:
            raise AlreadyRegistered(f"A menu predicate is already registered as {name!r}")
        self._predicates[name] = func
        return func

    def unregister(self, name):
        self._predicates.pop(name, None)

    def get(self, name):
        try:
            return self._predicates[name]
        except KeyError:
            raise UnregisteredPredicate(name) from None

    def __contains__(self, name):
        return name in self._predicates


handlers = HandlerRegistry()
predicates = PredicateRegistry()


__all__ = [
    "HandlerRegistry",
    "PredicateRegistry",
    "handlers",
    "predicates",
]
