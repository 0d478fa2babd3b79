# sr_core/incidents/services.py
from __future__ import annotations

import logging
from datetime import date

from django.db import DatabaseError, IntegrityError, transaction

from sr_core.audit.services import AuditService
from sr_core.common.api.exceptions import IdentifierConflict
from sr_core.common.identifiers import new_registration_number
from sr_core.common.validation import require_fields
from sr_core.incidents.classifier import classify
from sr_core.incidents.models import Incident
from sr_core.patients.services import PatientService, RiskService
from sr_core.subscriptions.entitlement import Entitlement

logger = logging.getLogger(__name__)


class IncidentService:
    """
    Incident registration (the only write path touching Patient and Incident).

    Callers must pass the Entitlement returned by require_entitlement(); the
    reporter is the entitled email.

    Steps:
      1) required fields
      2) find-or-create patient
      3) severity from incident type
      4) insert incident under a fresh registration number
      5) recompute patient risk tier
    Steps 2-4 commit together. Step 5 runs afterwards in its own transaction:
    if it fails the incident stands and the tier catches up on the next registration.
    """

    @staticmethod
    def register_incident(
        *,
        entitlement: Entitlement,
        identity: str,
        given_name: str,
        incident_type: str,
        description: str,
        incident_date: date,
        family_name: str = "",
        center_name: str = "",
    ) -> Incident:
        require_fields(
            identity=identity,
            given_name=given_name,
            incident_type=incident_type,
            description=description,
            incident_date=incident_date,
        )

        reporter_email = entitlement.email
        incident_type = incident_type.strip()
        severity = classify(incident_type)

        with transaction.atomic():
            patient = PatientService.find_or_create_patient(
                identity=identity,
                given_name=given_name,
                family_name=family_name,
                actor_email=reporter_email,
            )

            registration_number = new_registration_number()
            try:
                with transaction.atomic():
                    incident = Incident.objects.create(
                        patient=patient,
                        incident_type=incident_type,
                        description=description.strip(),
                        incident_date=incident_date,
                        severity=severity,
                        center_name=(center_name or "").strip() or entitlement.center_name,
                        registration_number=registration_number,
                        reported_by_email=reporter_email,
                    )
            except IntegrityError:
                logger.warning("registration number collision number=%s", registration_number)
                raise IdentifierConflict()

            AuditService.log(
                event_code="incident.registered",
                entity_type="Incident",
                entity_id=incident.id,
                actor_email=reporter_email,
                metadata={
                    "registration_number": registration_number,
                    "patient_id": str(patient.id),
                    "incident_type": incident_type,
                    "severity": severity,
                    "order_id": entitlement.order_id,
                },
            )

        logger.info(
            "incident registered number=%s fragment=%s severity=%s",
            registration_number,
            patient.identity_fragment,
            severity,
        )

        try:
            incident.patient = RiskService.recompute_risk_tier(patient_id=patient.id, actor_email=reporter_email)
        except DatabaseError:
            logger.warning(
                "risk recompute failed; tier left stale number=%s fragment=%s",
                registration_number,
                patient.identity_fragment,
                exc_info=True,
            )

        return incident
