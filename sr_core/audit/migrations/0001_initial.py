import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditEvent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("event_code", models.CharField(db_index=True, max_length=128)),
                ("entity_type", models.CharField(db_index=True, max_length=128)),
                ("entity_id", models.UUIDField(db_index=True)),
                ("actor_email", models.EmailField(blank=True, default="", max_length=254)),
                ("occurred_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("metadata", models.JSONField(default=dict)),
            ],
            options={
                "db_table": "audit_audit_event",
                "indexes": [
                    models.Index(fields=["entity_type", "entity_id"], name="audit_entity_idx"),
                    models.Index(fields=["actor_email", "occurred_at"], name="audit_actor_time_idx"),
                ],
            },
        ),
    ]
