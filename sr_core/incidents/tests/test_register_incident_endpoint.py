# sr_core/incidents/tests/test_register_incident_endpoint.py
import re

import pytest

from sr_core.conftest import caller_headers
from sr_core.incidents.models import Incident
from sr_core.patients.models import Patient

pytestmark = pytest.mark.django_db

URL = "/api/v1/incidents/"


def test_register_creates_patient_and_incident(api_client, active_subscription, incident_payload):
    r = api_client.post(URL, incident_payload, format="json", **caller_headers())
    assert r.status_code == 201, r.content

    assert re.fullmatch(r"INC-\d+-[0-9A-Z]{6}", r.data["registration_number"])
    assert r.data["severity"] == "HIGH"
    assert r.data["patient_risk_tier"] == "LOW"

    incident = Incident.objects.select_related("patient").get()
    assert incident.registration_number == r.data["registration_number"]
    assert incident.reported_by_email == "clinica@example.cl"
    # defaults to the subscribing center
    assert incident.center_name == "Clinica Central"
    assert incident.patient.identity_fragment == "678"


def test_three_incidents_escalate_patient_to_high(api_client, active_subscription, incident_payload):
    tiers = []
    severities = []
    for _ in range(3):
        r = api_client.post(URL, incident_payload, format="json", **caller_headers())
        assert r.status_code == 201, r.content
        tiers.append(r.data["patient_risk_tier"])
        severities.append(r.data["severity"])

    assert tiers == ["LOW", "MEDIUM", "HIGH"]
    assert severities == ["HIGH", "HIGH", "HIGH"]
    assert Patient.objects.get().risk_tier == "HIGH"
    assert len(set(Incident.objects.values_list("registration_number", flat=True))) == 3


def test_unknown_incident_type_is_stored_as_low(api_client, active_subscription, incident_payload):
    r = api_client.post(URL, dict(incident_payload, incident_type="other"), format="json", **caller_headers())
    assert r.status_code == 201, r.content
    assert r.data["severity"] == "LOW"
    assert Incident.objects.get().incident_type == "other"


def test_caller_email_may_come_from_payload(api_client, active_subscription, incident_payload):
    body = dict(incident_payload, user_email="CLINICA@example.cl")
    r = api_client.post(URL, body, format="json")
    assert r.status_code == 201, r.content


def test_explicit_center_name_wins(api_client, active_subscription, incident_payload):
    body = dict(incident_payload, center_name="Sede Norte")
    r = api_client.post(URL, body, format="json", **caller_headers())
    assert r.status_code == 201, r.content
    assert Incident.objects.get().center_name == "Sede Norte"


def test_without_caller_email_is_unauthorized(api_client, active_subscription, incident_payload):
    r = api_client.post(URL, incident_payload, format="json")
    assert r.status_code == 401, r.content
    assert r.data["error"]["code"] == "unauthorized"
    assert Patient.objects.count() == 0
    assert Incident.objects.count() == 0


def test_without_subscription_nothing_is_written(api_client, incident_payload, db):
    r = api_client.post(URL, incident_payload, format="json", **caller_headers())
    assert r.status_code == 403, r.content
    assert r.data["error"]["code"] == "subscription_required"
    assert Patient.objects.count() == 0
    assert Incident.objects.count() == 0


def test_pending_subscription_does_not_entitle(api_client, pending_subscription, incident_payload):
    r = api_client.post(URL, incident_payload, format="json", **caller_headers())
    assert r.status_code == 403, r.content
    assert Incident.objects.count() == 0


def test_expired_subscription_does_not_entitle(api_client, active_subscription, incident_payload):
    active_subscription.expires_at = active_subscription.activated_at
    active_subscription.save(update_fields=["expires_at"])

    r = api_client.post(URL, incident_payload, format="json", **caller_headers())
    assert r.status_code == 403, r.content
    assert Incident.objects.count() == 0


def test_missing_fields_are_listed(api_client, active_subscription):
    r = api_client.post(URL, {"identity": "12345678-9", "given_name": "Ana"}, format="json", **caller_headers())
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "missing_fields"
    assert r.data["error"]["details"] == {"fields": ["incident_type", "description", "incident_date"]}
    assert Patient.objects.count() == 0


def test_short_identity_is_rejected(api_client, active_subscription, incident_payload):
    r = api_client.post(URL, dict(incident_payload, identity="12-3"), format="json", **caller_headers())
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "invalid_identity"
    assert Patient.objects.count() == 0


def test_idempotency_key_replays_first_response(api_client, active_subscription, incident_payload):
    headers = dict(caller_headers(), HTTP_IDEMPOTENCY_KEY="retry-1")

    r1 = api_client.post(URL, incident_payload, format="json", **headers)
    r2 = api_client.post(URL, incident_payload, format="json", **headers)

    assert r1.status_code == 201, r1.content
    assert r2.status_code == 201, r2.content
    assert r1.data == r2.data
    assert Incident.objects.count() == 1
