from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Citizen",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "nin",
                    models.CharField(
                        help_text="National identification number (11 characters)",
                        max_length=11,
                        unique=True,
                    ),
                ),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "email",
                    models.EmailField(blank=True, max_length=150, null=True, unique=True),
                ),
                ("phone", models.CharField(blank=True, max_length=15, null=True)),
                ("date_of_birth", models.DateField()),
                ("state_of_origin", models.CharField(blank=True, max_length=100, null=True)),
                (
                    "lga",
                    models.CharField(
                        blank=True, help_text="Local government area", max_length=100, null=True
                    ),
                ),
                ("address", models.TextField(blank=True, null=True)),
                ("occupation", models.CharField(blank=True, max_length=100, null=True)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")],
                        max_length=10,
                        null=True,
                    ),
                ),
                ("marital_status", models.CharField(blank=True, max_length=20, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "citizens",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["last_name", "first_name"], name="citizens_name_idx"),
                    models.Index(fields=["state_of_origin"], name="citizens_state_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("gender__in", ["Male", "Female", "Other"]),
                            ("gender__isnull", True),
                            _connector="OR",
                        ),
                        name="citizens_gender_check",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="StaffUser",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("username", models.CharField(max_length=50, unique=True)),
                ("password_hash", models.CharField(max_length=255)),
                (
                    "role",
                    models.CharField(
                        choices=[("admin", "Administrator"), ("officer", "Registration Officer")],
                        default="officer",
                        max_length=20,
                    ),
                ),
                ("full_name", models.CharField(max_length=100)),
                (
                    "email",
                    models.EmailField(blank=True, max_length=150, null=True, unique=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("role__in", ["admin", "officer"])),
                        name="users_role_check",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("username", ""), _negated=True),
                        name="users_username_not_empty",
                    ),
                ],
            },
        ),
    ]
