"""
Management command listing the configured menu.

Prints every node of ``MENUABLE_CONFIG`` regardless of authorization, and
optionally the URL patterns generated for the menu's handlers.
"""

from django.core.management.base import BaseCommand
from django.urls import URLResolver

from menuable.conf import get_menu
from menuable.menu import Divider, Group


class Command(BaseCommand):
    help = "List the configured menu entries and, with --routes, the URLs generated for them"

    def add_arguments(self, parser):
        parser.add_argument(
            "--routes",
            action="store_true",
            help="Also list the URL patterns generated for menu handlers",
        )

    def handle(self, *args, **options):
        menu = get_menu()

        for node in menu.all():
            if isinstance(node, Divider):
                self.stdout.write("---")
            elif isinstance(node, Group):
                self.stdout.write(self.style.MIGRATE_HEADING(self.describe(node)))
                for item in node.items:
                    self.stdout.write(f"  {self.describe(item)}")
            else:
                self.stdout.write(self.describe(node))

        if options["routes"]:
            self.stdout.write("")
            self.stdout.write(self.style.MIGRATE_HEADING("Routes:"))
            for line in self.walk(menu.urls):
                self.stdout.write(f"  {line}")

    @staticmethod
    def describe(node):
        parts = [node.label]
        handler = getattr(node, "handler", None)
        if handler is not None:
            parts.append(f"-> {handler.menu.route_name}")
        elif getattr(node, "path", None):
            parts.append(f"-> {node.path}")
        if node.loyalty:
            parts.append(f"[loyalty: {node.loyalty}]")
        return " ".join(parts)

    def walk(self, patterns, prefix="", namespace=""):
        for pattern in patterns:
            if isinstance(pattern, URLResolver):
                ns = f"{namespace}{pattern.namespace}:" if pattern.namespace else namespace
                yield from self.walk(pattern.url_patterns, prefix + str(pattern.pattern), ns)
            else:
                yield f"{prefix}{pattern.pattern}  {namespace}{pattern.name}"
