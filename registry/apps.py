from django.apps import AppConfig


class RegistryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "registry"

    def ready(self):
        """Import signal handlers and other app initialization code."""
        import registry.signals  # noqa
