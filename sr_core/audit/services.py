# sr_core/audit/services.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction

from sr_core.audit.models import AuditEvent


@dataclass(frozen=True)
class AuditRecord:
    event_code: str
    entity_type: str
    entity_id: UUID
    actor_email: str
    metadata: Dict[str, Any]


class AuditService:
    """
    Central audit writer. Persists into AuditEvent (append-only).
    """

    @staticmethod
    @transaction.atomic
    def log(
        *,
        event_code: str,
        entity_type: str,
        entity_id: UUID,
        actor_email: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AuditRecord:
        metadata = metadata or {}

        AuditEvent.objects.create(
            event_code=event_code,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_email=actor_email or "",
            metadata=metadata,
        )

        return AuditRecord(
            event_code=event_code,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_email=actor_email or "",
            metadata=metadata,
        )
