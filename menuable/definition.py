"""
Per-handler menu descriptors.

A handler (a Django view class or view function) declares how it is routed
and who may see it by being decorated with :func:`menu`::

    @menu("admin/reports/sales", loyalty=lambda user: user.is_staff,
          member_actions=("export",))
    class SalesView(View):
        ...

The decorator builds one immutable :class:`MenuDefinition`, attaches it to the
handler as ``handler.menu`` and registers the handler under the identifier so
a menu configuration entry named ``reports/sales`` (under the ``admin``
namespace) resolves to it.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Optional

from .registry import handlers as default_registry


def NOTHING(_user):
    """Default loyalty: everybody is approved."""
    return True


@dataclass(frozen=True)
class MenuDefinition:
    """Static routing shape and authorization rule of one handler."""
    resource_name: str
    single: bool = False
    options: MappingProxyType = field(default_factory=lambda: MappingProxyType({}), compare=False)
    model_name: Optional[str] = None
    namespace: tuple = ()
    loyalty: Callable = NOTHING
    member_actions: tuple = ()
    actions: Optional[Callable] = None

    def __post_init__(self):
        if not isinstance(self.options, MappingProxyType):
            object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "namespace", tuple(self.namespace))
        object.__setattr__(self, "member_actions", tuple(self.member_actions))
        if self.model_name is None:
            object.__setattr__(self, "model_name", self.resource_name)
        if self.loyalty is None:
            object.__setattr__(self, "loyalty", NOTHING)

    def approves(self, user):
        return bool(self.loyalty(user))

    def with_loyalty(self, predicate):
        """Return a copy whose loyalty predicate is *predicate*."""
        return replace(self, loyalty=predicate)

    def with_actions(self, callback):
        return replace(self, actions=callback)

    def with_member_actions(self, values):
        return replace(self, member_actions=tuple(values))

    @property
    def landing_name(self):
        """URL name of the route a menu entry links to."""
        if self.single:
            return self.resource_name
        return f"{self.resource_name}_list"

    @property
    def route_name(self):
        return ":".join(self.namespace + (self.landing_name,))

    def url_name(self, action):
        """Fully namespaced URL name of *action* on this resource."""
        if action in ("list", "index") or (self.single and action == "show"):
            return self.route_name
        if action in ("detail", "show") and not self.single:
            name = f"{self.resource_name}_detail"
        else:
            name = f"{self.resource_name}_{action}"
        return ":".join(self.namespace + (name,))


def split_identifier(identifier):
    """Return the path segments of ``"admin/reports/sales"``-style identifiers."""
    return tuple(segment for segment in str(identifier).split("/") if segment)


def menu(
    identifier,
    *,
    resource_name=None,
    single=False,
    loyalty=None,
    actions=None,
    member_actions=(),
    model_name=None,
    registry=None,
    **options,
):
    """Class/function decorator declaring a handler's :class:`MenuDefinition`.

    Any extra keyword arguments become route options (``path`` to override
    the URL segment, ``lookup`` to change the detail converter).
    """
    segments = split_identifier(identifier)
    if not segments:
        raise ValueError("A menu identifier needs at least one segment")
    registry = default_registry if registry is None else registry

    definition = MenuDefinition(
        resource_name=resource_name or segments[-1],
        single=single,
        options=options,
        model_name=model_name,
        namespace=segments[:-1],
        loyalty=loyalty or NOTHING,
        member_actions=member_actions,
        actions=actions,
    )

    def decorator(handler):
        handler.menu = definition
        registry.register("/".join(segments), handler)
        return handler

    return decorator


__all__ = [
    "NOTHING",
    "MenuDefinition",
    "menu",
    "split_identifier",
]
