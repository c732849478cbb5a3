from django.db import models
from django.db.models import Q


class Citizen(models.Model):
    """Model representing a citizen record in the national registry."""

    class Gender(models.TextChoices):
        MALE = "Male", "Male"
        FEMALE = "Female", "Female"
        OTHER = "Other", "Other"

    nin = models.CharField(
        max_length=11, unique=True, help_text="National identification number (11 characters)"
    )
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=150, unique=True, blank=True, null=True)
    phone = models.CharField(max_length=15, blank=True, null=True)
    date_of_birth = models.DateField()
    state_of_origin = models.CharField(max_length=100, blank=True, null=True)
    lga = models.CharField(
        max_length=100, blank=True, null=True, help_text="Local government area"
    )
    address = models.TextField(blank=True, null=True)
    occupation = models.CharField(max_length=100, blank=True, null=True)
    gender = models.CharField(max_length=10, choices=Gender.choices, blank=True, null=True)
    marital_status = models.CharField(max_length=20, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "citizens"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["last_name", "first_name"], name="citizens_name_idx"),
            models.Index(fields=["state_of_origin"], name="citizens_state_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(gender__in=["Male", "Female", "Other"]) | Q(gender__isnull=True),
                name="citizens_gender_check",
            ),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.nin})"
