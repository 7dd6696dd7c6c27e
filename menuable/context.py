"""
Request-side collaborator of :class:`menuable.menu.MenuContext`.

Wraps a Django ``HttpRequest`` and gives the evaluator the four things it
needs: the current user, the request path, named loyalty predicates and URL
reversing for handler definitions.
"""

from django.urls import reverse

from .registry import predicates as default_predicates


class MenuRequestContext:
    def __init__(self, request, *, predicates=None, current_app=None):
        self.request = request
        self.predicates = default_predicates if predicates is None else predicates
        self.current_app = current_app

    @property
    def current_user(self):
        return getattr(self.request, "user", None)

    def check(self, name):
        """Evaluate the loyalty predicate registered as *name* for this request.

        Raises ``UnregisteredPredicate`` when nothing is registered under *name*.
        """
        return bool(self.predicates.get(name)(self.request))

    def url_for(self, definition):
        return reverse(definition.route_name, current_app=self.current_app)
