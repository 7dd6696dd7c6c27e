"""
Back-office handlers linked from the menu.

Each handler serves every route of its resource and receives the route's
``action`` (``list``, ``detail``, ``show`` or a declared extra action) as a
keyword argument.
"""

from django.http import JsonResponse
from django.views import View

from menuable.definition import menu


def _is_staff(user):
    return bool(user and user.is_staff)


def _is_authenticated(user):
    return bool(user and user.is_authenticated)


class ResourceView(View):
    """Answers with a small JSON description of the requested action."""

    def get(self, request, action, pk=None):
        return JsonResponse(
            {
                "resource": self.menu.resource_name,
                "action": action,
                "pk": pk,
            }
        )


@menu("employees", loyalty=_is_authenticated, member_actions=("activate", "deactivate"))
class EmployeesView(ResourceView):
    pass


def _asset_routes(scope):
    scope.collection("bulk-delete", "bulk-status")
    scope.member("unassign", "clone")


@menu("assets", loyalty=_is_authenticated, actions=_asset_routes, lookup="<int:pk>")
class AssetsView(ResourceView):
    pass


@menu("spare_parts", loyalty=_is_authenticated, path="spare-parts")
class SparePartsView(ResourceView):
    pass


@menu("vendors")
def vendors(request, action, pk=None):
    return JsonResponse({"resource": "vendors", "action": action, "pk": pk})


@menu("admin/account", single=True, loyalty=_is_authenticated, member_actions=("password",))
class AccountView(ResourceView):
    pass


@menu("admin/reports/activity", loyalty=_is_staff, model_name="ActivityLog")
class ActivityReportView(ResourceView):
    pass
