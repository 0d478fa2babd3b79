# sr_core/patients/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import IntegrityError, transaction

from sr_core.audit.services import AuditService
from sr_core.patients.identity import derive_initials, normalize_identity
from sr_core.patients.models import Patient
from sr_core.patients.risk import escalate

logger = logging.getLogger(__name__)


class PatientService:
    @staticmethod
    @transaction.atomic
    def find_or_create_patient(
        *,
        identity: str,
        given_name: str,
        family_name: str = "",
        actor_email: str = "",
    ) -> Patient:
        """
        Exact, case-sensitive lookup on the trimmed identity string.
        A new patient starts at RiskTier.LOW.
        """
        normalized = normalize_identity(identity)

        patient = Patient.objects.filter(full_identity=normalized.full_identity).first()
        if patient is not None:
            return patient

        initials = derive_initials(given_name, family_name)

        try:
            with transaction.atomic():
                patient = Patient.objects.create(
                    full_identity=normalized.full_identity,
                    identity_fragment=normalized.fragment,
                    given_name=given_name.strip(),
                    family_name=(family_name or "").strip(),
                    initials=initials,
                )
        except IntegrityError:
            # Another request registered the same identity first.
            return Patient.objects.get(full_identity=normalized.full_identity)

        AuditService.log(
            event_code="patient.created",
            entity_type="Patient",
            entity_id=patient.id,
            actor_email=actor_email,
            metadata={"fragment": patient.identity_fragment, "initials": initials},
        )
        logger.info("patient created fragment=%s initials=%s", patient.identity_fragment, initials)
        return patient


class RiskService:
    @staticmethod
    @transaction.atomic
    def recompute_risk_tier(*, patient_id: UUID, actor_email: str = "") -> Patient:
        """
        Re-derives risk_tier from the current incident count and persists it.
        The row lock serializes concurrent recomputes for the same patient.
        """
        patient = Patient.objects.select_for_update().get(id=patient_id)

        incident_count = patient.incidents.count()
        new_tier = escalate(incident_count)
        old_tier = patient.risk_tier

        patient.risk_tier = new_tier
        patient.save(update_fields=["risk_tier", "updated_at"])

        if new_tier != old_tier:
            AuditService.log(
                event_code="patient.risk_changed",
                entity_type="Patient",
                entity_id=patient.id,
                actor_email=actor_email,
                metadata={"from": old_tier, "to": new_tier, "incident_count": incident_count},
            )
            logger.info(
                "patient risk changed fragment=%s %s->%s incidents=%d",
                patient.identity_fragment,
                old_tier,
                new_tier,
                incident_count,
            )
        return patient
