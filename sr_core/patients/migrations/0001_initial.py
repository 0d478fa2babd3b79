import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("full_identity", models.CharField(max_length=32, unique=True)),
                ("identity_fragment", models.CharField(max_length=3)),
                ("given_name", models.CharField(max_length=100)),
                ("family_name", models.CharField(blank=True, default="", max_length=100)),
                ("initials", models.CharField(max_length=2)),
                (
                    "risk_tier",
                    models.CharField(
                        choices=[("LOW", "Low"), ("MEDIUM", "Medium"), ("HIGH", "High")],
                        default="LOW",
                        max_length=10,
                    ),
                ),
            ],
            options={
                "db_table": "patients_patient",
                "indexes": [
                    models.Index(fields=["identity_fragment", "initials"], name="patient_fragment_initials_idx"),
                ],
            },
        ),
    ]
