# sr_core/subscriptions/tests/test_subscription_endpoints.py
import pytest

from sr_core.subscriptions.models import Subscription

pytestmark = pytest.mark.django_db


def _create(api_client, **overrides):
    body = {
        "plan_id": "profesional",
        "email": "centro@example.cl",
        "center_name": "Centro Medico Sur",
        "phone": "+56 2 2345 6789",
        "tax_id": "76.543.210-3",
    }
    body.update(overrides)
    return api_client.post("/api/v1/subscriptions/", body, format="json")


def test_create_returns_order_and_payment_url(api_client):
    r = _create(api_client)
    assert r.status_code == 201, r.content

    assert r.data["order_id"].startswith("SUB-")
    assert r.data["plan_id"] == "profesional"
    assert r.data["amount"] == 19990
    assert f"order={r.data['order_id']}" in r.data["payment_url"]


def test_create_unknown_plan(api_client):
    r = _create(api_client, plan_id="platinum")
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "unknown_plan"
    assert Subscription.objects.count() == 0


def test_confirm_then_status(api_client):
    order_id = _create(api_client).data["order_id"]

    r = api_client.post(
        "/api/v1/subscriptions/confirm/",
        {"order_id": order_id, "payment_token": "tok_ok"},
        format="json",
    )
    assert r.status_code == 200, r.content
    assert r.data["registration_number"] == order_id
    assert r.data["status"] == "active"
    assert r.data["expires_at"]

    r = api_client.get("/api/v1/subscriptions/status/centro@example.cl/")
    assert r.status_code == 200, r.content
    assert r.data["active"] is True

    detail = r.data["subscription"]
    assert detail["plan_id"] == "profesional"
    assert detail["plan"] == "Plan Profesional"
    assert detail["center_name"] == "Centro Medico Sur"
    assert detail["days_remaining"] in (29, 30)


def test_status_before_payment(api_client):
    _create(api_client)

    r = api_client.get("/api/v1/subscriptions/status/centro@example.cl/")
    assert r.status_code == 200, r.content
    assert r.data == {"active": False}


def test_confirm_requires_order_id(api_client):
    r = api_client.post("/api/v1/subscriptions/confirm/", {}, format="json")
    assert r.status_code == 400, r.content
    assert r.data["error"]["details"] == {"fields": ["order_id"]}


def test_create_without_plan_is_unknown_plan(api_client):
    r = _create(api_client, plan_id="")
    assert r.status_code == 400, r.content
    assert r.data["error"]["code"] == "unknown_plan"
