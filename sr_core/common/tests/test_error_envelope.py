# sr_core/common/tests/test_error_envelope.py
import pytest
from django.db import OperationalError

from sr_core.conftest import caller_headers

pytestmark = pytest.mark.django_db


def test_health(api_client):
    r = api_client.get("/api/v1/health/")
    assert r.status_code == 200, r.content
    assert r.data["status"] == "ok"
    assert "timestamp" in r.data


def test_unversioned_alias_serves_same_routes(api_client):
    r = api_client.get("/api/health/")
    assert r.status_code == 200, r.content


def test_error_envelope_shape(api_client):
    r = api_client.post("/api/v1/subscriptions/confirm/", {"order_id": "SUB-0-nothere"}, format="json")
    assert r.status_code == 404, r.content

    err = r.data["error"]
    assert err["code"] == "order_not_found"
    assert err["message"]
    assert err["request_id"]


def test_missing_fields_envelope_lists_fields(api_client):
    r = api_client.post(
        "/api/v1/subscriptions/",
        {"plan_id": "basico", "email": "x@example.cl"},
        format="json",
    )
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "missing_fields"
    assert r.data["error"]["details"] == {"fields": ["center_name", "phone"]}


def test_database_error_maps_to_store_unavailable(api_client, monkeypatch):
    def boom(**kwargs):
        raise OperationalError("connection refused")

    monkeypatch.setattr("sr_core.subscriptions.api.views.subscription_status", boom)

    r = api_client.get("/api/v1/subscriptions/status/x@example.cl/")
    assert r.status_code == 503, r.content
    assert r.data["error"]["code"] == "store_unavailable"
    assert r.data["error"]["details"] == {"retryable": True}


def test_subscription_required_envelope_flags_subscription(api_client):
    r = api_client.post("/api/v1/incidents/", {}, format="json", **caller_headers("nobody@example.cl"))
    assert r.status_code == 403, r.content
    assert r.data["error"]["code"] == "subscription_required"
    assert r.data["error"]["details"] == {"subscription_required": True}
