"""
Tests for registry bootstrap: the management command, admin seeding and models.
"""

import os
import subprocess
import sys
from io import StringIO
from pathlib import Path

import pytest
from django.apps import apps
from django.core.management import call_command
from django.db import IntegrityError, transaction
from rest_framework.settings import api_settings
from registry.api.authentication import BearerTokenAuthentication
from registry.api.exception_handler import api_exception_handler
from registry.models import Citizen, StaffUser
from registry.signals import seed_default_admin

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.django_db
class TestBootstrapCommand:
    """Test cases for the bootstrap_registry management command."""

    def test_runs_migrate_and_seeds_admin(self, mocker):
        """Test that the command migrates then ensures the administrator."""
        migrate = mocker.patch("registry.management.commands.bootstrap_registry.call_command")
        StaffUser.objects.filter(username="admin").delete()
        out = StringIO()

        call_command("bootstrap_registry", stdout=out)

        migrate.assert_called_once_with("migrate", interactive=False, verbosity=1)
        assert StaffUser.objects.filter(username="admin", role=StaffUser.Role.ADMIN).exists()
        assert "Registry ready" in out.getvalue()

    def test_second_run_is_noop(self, mocker):
        """Test that running twice leaves a single administrator."""
        mocker.patch("registry.management.commands.bootstrap_registry.call_command")
        original_hash = StaffUser.objects.get(username="admin").password_hash

        call_command("bootstrap_registry", stdout=StringIO())
        call_command("bootstrap_registry", stdout=StringIO())

        assert StaffUser.objects.filter(username="admin").count() == 1
        assert StaffUser.objects.get(username="admin").password_hash == original_hash

    def test_seed_uses_configured_identity(self, mocker, settings):
        """Test that the administrator defaults come from settings."""
        mocker.patch("registry.management.commands.bootstrap_registry.call_command")
        settings.DEFAULT_ADMIN_USERNAME = "registrar"
        settings.DEFAULT_ADMIN_FULL_NAME = "Chief Registrar"

        call_command("bootstrap_registry", stdout=StringIO())

        user = StaffUser.objects.get(username="registrar")
        assert user.full_name == "Chief Registrar"
        assert user.role == StaffUser.Role.ADMIN

    def test_renamed_admin_with_taken_email(self, mocker, settings):
        """Test that seeding a new admin name succeeds when the email already belongs to the old one."""
        mocker.patch("registry.management.commands.bootstrap_registry.call_command")
        settings.DEFAULT_ADMIN_USERNAME = "registrar"
        previous = StaffUser.objects.get(username="admin")

        call_command("bootstrap_registry", stdout=StringIO())
        call_command("bootstrap_registry", stdout=StringIO())

        user = StaffUser.objects.get(username="registrar")
        assert user.email is None
        assert StaffUser.objects.filter(username="registrar").count() == 1
        assert StaffUser.objects.get(pk=previous.pk).email == previous.email

    def test_seed_sets_email_when_free(self, mocker, settings):
        """Test that the configured email is used when no account holds it."""
        mocker.patch("registry.management.commands.bootstrap_registry.call_command")
        settings.DEFAULT_ADMIN_USERNAME = "registrar"
        settings.DEFAULT_ADMIN_EMAIL = "registrar@example.com"

        call_command("bootstrap_registry", stdout=StringIO())

        assert StaffUser.objects.get(username="registrar").email == "registrar@example.com"


class TestAdminSeedSignal:
    """Test cases for the post_migrate seeding hook."""

    def test_seeds_on_migrated_database(self, mocker):
        """Test that seeding targets the database that was migrated."""
        ensure = mocker.patch("registry.services.auth_service.ensure_default_admin")
        ensure.return_value.username = "admin"

        seed_default_admin(sender=None, app_config=apps.get_app_config("registry"), using="replica")

        ensure.assert_called_once_with(using="replica")

    def test_ignores_other_apps(self, mocker):
        """Test that migrating another app does not seed."""
        ensure = mocker.patch("registry.services.auth_service.ensure_default_admin")

        seed_default_admin(sender=None, app_config=apps.get_app_config("auth"), using="default")

        ensure.assert_not_called()


@pytest.mark.django_db
class TestModels:
    """Test cases for model representation and store constraints."""

    def test_citizen_str(self, create_citizen):
        """Test Citizen string representation."""
        citizen = create_citizen(nin="12345678901", first_name="Halima", last_name="Yusuf")
        assert str(citizen) == "Halima Yusuf (12345678901)"

    def test_staff_user_str(self, officer):
        """Test StaffUser string representation."""
        assert str(officer) == "officer1 (officer)"

    def test_staff_role_constraint(self, create_staff_user):
        """Test that the store rejects roles outside admin and officer."""
        with pytest.raises(IntegrityError), transaction.atomic():
            create_staff_user(username="rogue", role="superuser")

    def test_citizen_gender_constraint(self, create_citizen):
        """Test that the store rejects genders outside the closed set."""
        with pytest.raises(IntegrityError), transaction.atomic():
            create_citizen(gender="Unknown")

    def test_nin_unique_in_store(self, create_citizen):
        """Test the uniqueness constraint on the national identifier."""
        create_citizen(nin="77788899900")

        with pytest.raises(IntegrityError), transaction.atomic():
            create_citizen(nin="77788899900")

        assert Citizen.objects.filter(nin="77788899900").count() == 1


class TestProjectWiring:
    """Test cases for settings that reference project modules."""

    def test_system_check_in_fresh_interpreter(self):
        """Test that the configured DRF classes import cleanly from a cold start."""
        result = subprocess.run(
            [sys.executable, "manage.py", "check"],
            cwd=PROJECT_ROOT,
            env={**os.environ, "DJANGO_SETTINGS_MODULE": "config.test_settings"},
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 0, result.stderr

    def test_rest_framework_hooks_resolve(self):
        """Test that DRF loads the registry exception handler and authenticator."""
        assert api_settings.EXCEPTION_HANDLER is api_exception_handler
        assert api_settings.DEFAULT_AUTHENTICATION_CLASSES == [BearerTokenAuthentication]
