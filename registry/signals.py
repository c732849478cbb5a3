import logging

from django.db.models.signals import post_migrate
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@receiver(post_migrate)
def seed_default_admin(sender, app_config=None, using="default", **kwargs):
    """Seed the default administrator once the registry tables exist."""
    if app_config is None or app_config.name != "registry":
        return

    from registry.services.auth_service import ensure_default_admin

    user = ensure_default_admin(using=using)
    logger.debug(f"Default administrator available as {user.username!r} on {using}")
