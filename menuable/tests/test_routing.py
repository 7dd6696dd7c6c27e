"""
Tests for the Django router handle and the URL patterns emitted for a menu.

Covers:
- Plural and singular resources, member and collection routes
- Route options (path override, lookup converter)
- Nested namespaces reversing as ``outer:inner:name``
- Nested namespaces resolving ahead of a same-named resource
- Views receiving the route's ``action``
"""

from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import URLResolver, resolve, reverse
from django.urls.resolvers import RegexPattern

from menuable.definition import menu
from menuable.menu import Menu
from menuable.registry import HandlerRegistry
from menuable.routing import Router, as_view

from .handlers import AccountView, UsersView


def echo(request, action, pk=None):
    return (action, pk)


@override_settings(ROOT_URLCONF="menuable.tests.urls")
class MenuUrlsTests(SimpleTestCase):
    def test_plural_resource_routes(self):
        self.assertEqual(reverse("admin:users_list"), "/admin/users/")
        self.assertEqual(reverse("admin:users_detail", kwargs={"pk": "7"}), "/admin/users/7/")
        self.assertEqual(reverse("admin:users_activate", kwargs={"pk": "7"}), "/admin/users/7/activate/")

    def test_singular_resource_routes(self):
        self.assertEqual(reverse("admin:account"), "/admin/account/")

    def test_nested_namespace_routes(self):
        self.assertEqual(reverse("admin:reports:sales_list"), "/admin/reports/sales/")
        self.assertEqual(
            reverse("admin:reports:sales_export", kwargs={"pk": "3"}),
            "/admin/reports/sales/3/export/",
        )
        self.assertEqual(reverse("admin:reports:stock_list"), "/admin/reports/stock/")

    def test_resolved_route_passes_action(self):
        match = resolve("/admin/users/7/activate/")
        self.assertEqual(match.kwargs, {"action": "activate", "pk": "7"})
        self.assertEqual(match.namespaces, ["admin"])

    def test_handler_serves_route(self):
        response = self.client.get("/admin/reports/sales/3/export/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"sales:export:3")

    def test_unknown_member_is_404(self):
        self.assertEqual(self.client.get("/admin/users/7/missing/").status_code, 404)


class RouterTests(SimpleTestCase):
    def names(self, patterns, namespace="", prefix=""):
        names = []
        for pattern in patterns:
            if isinstance(pattern, URLResolver):
                names.extend(
                    self.names(
                        pattern.url_patterns,
                        f"{namespace}{pattern.namespace}:",
                        prefix + str(pattern.pattern),
                    )
                )
            else:
                names.append((f"{namespace}{pattern.name}", prefix + str(pattern.pattern)))
        return names

    def test_collection_routes_precede_detail(self):
        router = Router()
        with router.resources("assets", echo, lookup="<int:pk>") as scope:
            scope.member("clone")
            scope.collection("bulk-delete")

        self.assertEqual(
            self.names(router.urls),
            [
                ("assets_list", "assets/"),
                ("assets_bulk-delete", "assets/bulk-delete/"),
                ("assets_detail", "assets/<int:pk>/"),
                ("assets_clone", "assets/<int:pk>/clone/"),
            ],
        )

    def test_path_option_changes_url_not_name(self):
        router = Router()
        with router.resources("spare_parts", echo, path="spare-parts"):
            pass
        self.assertEqual(self.names(router.urls)[0], ("spare_parts_list", "spare-parts/"))

    def test_singular_resource(self):
        router = Router()
        with router.resource("account", echo) as scope:
            scope.member("password")
            scope.collection("avatar")
        self.assertEqual(
            self.names(router.urls),
            [
                ("account", "account/"),
                ("account_password", "account/password/"),
                ("account_avatar", "account/avatar/"),
            ],
        )

    def test_nested_namespaces(self):
        router = Router()
        with router.namespace("admin"):
            with router.namespace("reports"):
                with router.resources("sales", echo):
                    pass
            with router.resources("users", echo):
                pass

        self.assertEqual(
            self.names(router.urls),
            [
                ("admin:reports:sales_list", "admin/reports/sales/"),
                ("admin:reports:sales_detail", "admin/reports/sales/<str:pk>/"),
                ("admin:users_list", "admin/users/"),
                ("admin:users_detail", "admin/users/<str:pk>/"),
            ],
        )

    def test_namespace_route_matches_its_name(self):
        router = Router()
        with router.namespace("/admin/"):
            with router.resource("account", echo):
                pass
        (resolver,) = router.urls
        self.assertEqual(str(resolver.pattern), "admin/")
        self.assertEqual(resolver.namespace, "admin")

    def test_urls_returns_a_copy(self):
        router = Router()
        router.urls.append("junk")
        self.assertEqual(router.urls, [])

    def test_as_view_wraps_class_based_views(self):
        view = as_view(UsersView)
        self.assertIs(view.view_class, UsersView)
        self.assertIs(as_view(echo), echo)

    def test_wrapped_view_receives_action(self):
        request = RequestFactory().get("/account/")
        response = as_view(AccountView)(request, action="show")
        self.assertEqual(response.content, b"account:show:")


class MenuRouteOrderTests(SimpleTestCase):
    """A handler sharing its name with a nested namespace keeps both reachable."""

    def setUp(self):
        registry = HandlerRegistry()

        @menu("reports", registry=registry)
        def reports(request, action, pk=None):
            return None

        @menu("reports/sales", registry=registry)
        def sales(request, action, pk=None):
            return None

        urls = Menu([{"name": "reports", "items": [{"name": "reports/sales"}]}], registry=registry).urls
        self.resolver = URLResolver(RegexPattern(r"^/"), urls)

    def test_nested_namespace_is_not_captured_by_detail_route(self):
        match = self.resolver.resolve("/reports/sales/")
        self.assertEqual(match.view_name, "reports:sales_list")
        self.assertEqual(match.kwargs, {"action": "list"})

    def test_parent_routes_still_resolve(self):
        self.assertEqual(self.resolver.resolve("/reports/").view_name, "reports_list")
        match = self.resolver.resolve("/reports/5/")
        self.assertEqual(match.view_name, "reports_detail")
        self.assertEqual(match.kwargs, {"action": "detail", "pk": "5"})
