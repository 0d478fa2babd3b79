# sr_core/audit/tests/test_audit_events.py
import pytest

from sr_core.audit.models import AuditEvent
from sr_core.audit.selectors import events_for_entity
from sr_core.incidents.models import Incident
from sr_core.incidents.services import IncidentService

pytestmark = pytest.mark.django_db


def test_subscription_lifecycle_is_audited(active_subscription):
    codes = list(
        events_for_entity(entity_type="Subscription", entity_id=active_subscription.id).values_list(
            "event_code", flat=True
        )
    )
    assert codes == ["subscription.created", "subscription.activated"]


def test_registration_audits_patient_incident_and_risk(entitlement):
    for _ in range(2):
        IncidentService.register_incident(
            entitlement=entitlement,
            identity="15.555.123-K",
            given_name="Luis",
            family_name="Perez",
            incident_type="threats",
            description="Amenazas al guardia.",
            incident_date="2026-02-10",
        )

    incident = Incident.objects.order_by("created_at").first()
    patient_id = incident.patient_id

    assert AuditEvent.objects.filter(event_code="patient.created", entity_id=patient_id).count() == 1
    assert AuditEvent.objects.filter(event_code="incident.registered").count() == 2

    risk = AuditEvent.objects.get(event_code="patient.risk_changed", entity_id=patient_id)
    assert risk.metadata == {"from": "LOW", "to": "MEDIUM", "incident_count": 2}
    assert risk.actor_email == entitlement.email
