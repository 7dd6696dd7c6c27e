"""Errors raised while building or evaluating a menu."""

from django.core.exceptions import ImproperlyConfigured


class MenuConfigurationError(ImproperlyConfigured):
    """The menu configuration is malformed or refers to something unsupported."""


class UnregisteredPredicate(MenuConfigurationError):
    """A node names a loyalty predicate that nobody registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"No menu predicate registered under {name!r}")


class AlreadyRegistered(MenuConfigurationError):
    pass
