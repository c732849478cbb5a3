"""
Django management command to prepare the registry database.

Creates the schema if it is absent and seeds the default administrator.
Running it again is a no-op.

Usage:
    python manage.py bootstrap_registry
"""

from django.core.management import call_command
from django.core.management.base import BaseCommand
from registry.services.auth_service import ensure_default_admin


class Command(BaseCommand):
    help = "Create the registry schema if absent and seed the default administrator"

    def handle(self, *args, **options):
        self.stdout.write("Applying registry schema...")
        call_command("migrate", interactive=False, verbosity=options["verbosity"])

        user = ensure_default_admin()
        self.stdout.write(
            self.style.SUCCESS(f"Registry ready. Administrator account: {user.username}")
        )
