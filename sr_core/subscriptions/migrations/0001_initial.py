import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MedicalCenter",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("name", models.CharField(max_length=200)),
                ("tax_id", models.CharField(blank=True, default="", max_length=20)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
                ("address", models.TextField(blank=True, default="")),
                ("plan_id", models.CharField(blank=True, default="", max_length=50)),
                ("subscription_active", models.BooleanField(db_index=True, default=False)),
            ],
            options={
                "db_table": "subscriptions_medical_center",
            },
        ),
        migrations.CreateModel(
            name="Subscription",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("order_id", models.CharField(max_length=100, unique=True)),
                ("plan_id", models.CharField(max_length=50)),
                ("email", models.EmailField(max_length=254)),
                ("amount", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("active", "Active")],
                        db_index=True,
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("started_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("activated_at", models.DateTimeField(blank=True, null=True)),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("payment_token", models.CharField(blank=True, default="", max_length=200)),
                ("payment_data", models.JSONField(blank=True, default=dict)),
                (
                    "center",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="subscriptions",
                        to="subscriptions.medicalcenter",
                    ),
                ),
            ],
            options={
                "db_table": "subscriptions_subscription",
                "indexes": [
                    models.Index(fields=["email"], name="subscription_email_idx"),
                    models.Index(fields=["email", "status", "expires_at"], name="subscription_entitlement_idx"),
                ],
            },
        ),
    ]
