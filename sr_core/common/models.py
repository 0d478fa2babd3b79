# sr_core/common/models.py
from __future__ import annotations

import uuid

from django.db import models


class TimeStampedModel(models.Model):
    """
    Standard timestamps for all entities.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UUIDModel(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


# -------------------------------------------------------------------
# Durable idempotency
# -------------------------------------------------------------------

class IdempotencyRecord(TimeStampedModel):
    """
    Stores idempotent responses durably.

    Keyed by:
      (actor_email, method, path, idempotency_key)

    The caller identity is the email resolved by the entitlement gate,
    so two centers can never replay each other's responses.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # request identity
    actor_email = models.EmailField(db_index=True)
    method = models.CharField(max_length=16)
    path = models.CharField(max_length=255)
    idempotency_key = models.CharField(max_length=255)

    # stored response
    status_code = models.PositiveIntegerField(default=200)
    response_data = models.JSONField(default=dict)

    class Meta:
        db_table = "common_idempotency_record"
        constraints = [
            models.UniqueConstraint(
                fields=["actor_email", "method", "path", "idempotency_key"],
                name="uq_idempo_actor_method_path_key",
            )
        ]

    def __str__(self) -> str:
        return f"{self.method} {self.path} {self.idempotency_key}"
