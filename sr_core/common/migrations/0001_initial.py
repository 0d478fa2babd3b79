import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="IdempotencyRecord",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("actor_email", models.EmailField(db_index=True, max_length=254)),
                ("method", models.CharField(max_length=16)),
                ("path", models.CharField(max_length=255)),
                ("idempotency_key", models.CharField(max_length=255)),
                ("status_code", models.PositiveIntegerField(default=200)),
                ("response_data", models.JSONField(default=dict)),
            ],
            options={
                "db_table": "common_idempotency_record",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("actor_email", "method", "path", "idempotency_key"),
                        name="uq_idempo_actor_method_path_key",
                    )
                ],
            },
        ),
    ]
