from django.db import models
from django.db.models import Q


class StaffUser(models.Model):
    """
    Staff account allowed to use the registry API.

    Only the password hash is stored; hashing and verification go through
    ``django.contrib.auth.hashers``.
    """

    class Role(models.TextChoices):
        ADMIN = "admin", "Administrator"
        OFFICER = "officer", "Registration Officer"

    username = models.CharField(max_length=50, unique=True)
    password_hash = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.OFFICER)
    full_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=150, unique=True, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "users"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(role__in=["admin", "officer"]), name="users_role_check"
            ),
            models.CheckConstraint(condition=~Q(username=""), name="users_username_not_empty"),
        ]

    def __str__(self):
        return f"{self.username} ({self.role})"
