# sr_core/audit/models.py
import uuid

from django.db import models


class AuditEvent(models.Model):
    """
    Immutable audit record.
    Ground-truth timeline of registrations and entitlement changes.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    event_code = models.CharField(max_length=128, db_index=True)  # e.g. "incident.registered"
    entity_type = models.CharField(max_length=128, db_index=True)  # e.g. "Incident"
    entity_id = models.UUIDField(db_index=True)

    actor_email = models.EmailField(blank=True, default="")

    occurred_at = models.DateTimeField(auto_now_add=True, db_index=True)
    metadata = models.JSONField(default=dict)

    class Meta:
        db_table = "audit_audit_event"
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="audit_entity_idx"),
            models.Index(fields=["actor_email", "occurred_at"], name="audit_actor_time_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_code} {self.entity_type}:{self.entity_id}"
