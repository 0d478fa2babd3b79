# sr_core/patients/tests/test_search_endpoint.py
import pytest

from sr_core.conftest import caller_headers
from sr_core.patients.services import PatientService

pytestmark = pytest.mark.django_db


def _register(api_client, payload, **overrides):
    body = dict(payload, **overrides)
    r = api_client.post("/api/v1/incidents/", body, format="json", **caller_headers())
    assert r.status_code == 201, r.content
    return r.data


def test_search_returns_patient_with_incidents_newest_first(api_client, active_subscription, incident_payload):
    _register(api_client, incident_payload, incident_date="2026-01-05")
    _register(api_client, incident_payload, incident_date="2026-03-20")
    _register(api_client, incident_payload, incident_date="2026-02-11")

    r = api_client.post("/api/v1/patients/search/", {"fragment": "678", "initials": "as"}, format="json")
    assert r.status_code == 200, r.content

    patients = r.data["patients"]
    assert len(patients) == 1

    match = patients[0]
    assert match["identity_fragment"] == "678"
    assert match["initials"] == "AS"
    assert match["risk_tier"] == "HIGH"
    assert match["incident_count"] == 3
    assert [i["incident_date"] for i in match["incidents"]] == ["2026-03-20", "2026-02-11", "2026-01-05"]


def test_search_never_exposes_full_identity_or_names(api_client, active_subscription, incident_payload):
    _register(api_client, incident_payload)

    r = api_client.post("/api/v1/patients/search/", {"fragment": "678", "initials": "AS"}, format="json")
    match = r.data["patients"][0]

    assert "full_identity" not in match
    assert "given_name" not in match
    assert "family_name" not in match


def test_search_can_match_several_patients(api_client, db):
    PatientService.find_or_create_patient(identity="11111678-1", given_name="Ana", family_name="Soto")
    PatientService.find_or_create_patient(identity="22222678-2", given_name="Alberto", family_name="Silva")
    PatientService.find_or_create_patient(identity="33333678-3", given_name="Beatriz", family_name="Soto")

    r = api_client.post("/api/v1/patients/search/", {"fragment": "678", "initials": "AS"}, format="json")
    assert r.status_code == 200, r.content
    assert len(r.data["patients"]) == 2
    assert all(p["incident_count"] == 0 for p in r.data["patients"])


def test_search_without_match_returns_empty_list(api_client, db):
    r = api_client.post("/api/v1/patients/search/", {"fragment": "999", "initials": "ZZ"}, format="json")
    assert r.status_code == 200, r.content
    assert r.data == {"patients": []}


def test_search_requires_both_fields(api_client, db):
    r = api_client.post("/api/v1/patients/search/", {"fragment": "678"}, format="json")
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "missing_fields"
    assert r.data["error"]["details"] == {"fields": ["initials"]}


def test_search_rejects_malformed_fragment(api_client, db):
    r = api_client.post("/api/v1/patients/search/", {"fragment": "67", "initials": "AS"}, format="json")
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "validation_error"


def test_stored_initials_are_always_searchable(api_client, db):
    p = PatientService.find_or_create_patient(identity="12345678-9", given_name="1Ana", family_name="Soto")
    assert p.initials == "1S"

    r = api_client.post("/api/v1/patients/search/", {"fragment": "678", "initials": "1s"}, format="json")
    assert r.status_code == 200, r.content
    assert [m["id"] for m in r.data["patients"]] == [str(p.id)]


def test_search_rejects_initials_with_spaces(api_client, db):
    r = api_client.post("/api/v1/patients/search/", {"fragment": "678", "initials": "A B"}, format="json")
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "validation_error"
