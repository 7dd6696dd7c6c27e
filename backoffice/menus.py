"""
Menu registrations for the back office.

Imported by ``menuable`` at startup; importing ``views`` registers the
handlers, the functions below are the loyalty predicates named in
``core/menu.yml``.
"""

from menuable.registry import predicates

from . import views  # noqa: F401


@predicates.register("staff")
def staff(request):
    return request.user.is_staff


@predicates.register("procurement")
def procurement(request):
    return request.user.groups.filter(name="procurement").exists()
