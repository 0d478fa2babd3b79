import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Incident",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("incident_type", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("incident_date", models.DateField()),
                (
                    "severity",
                    models.CharField(
                        choices=[("LOW", "Low"), ("MEDIUM", "Medium"), ("HIGH", "High")],
                        max_length=10,
                    ),
                ),
                ("center_name", models.CharField(blank=True, default="", max_length=200)),
                ("registration_number", models.CharField(max_length=50, unique=True)),
                ("reported_by_email", models.EmailField(max_length=254)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "patient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="incidents",
                        to="patients.patient",
                    ),
                ),
            ],
            options={
                "db_table": "incidents_incident",
                "indexes": [
                    models.Index(fields=["patient", "incident_date"], name="incident_patient_date_idx"),
                ],
            },
        ),
    ]
