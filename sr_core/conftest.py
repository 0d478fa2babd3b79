# sr_core/conftest.py
import pytest
from rest_framework.test import APIClient

from sr_core.subscriptions.entitlement import require_entitlement
from sr_core.subscriptions.services import SubscriptionService

CENTER_EMAIL = "clinica@example.cl"


def caller_headers(email: str = CENTER_EMAIL):
    """
    Caller identity header as seen by the entitlement gate.
    DRF test client requires HTTP_ prefix.
    """
    return {"HTTP_USER_EMAIL": email}


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def center_email():
    return CENTER_EMAIL


@pytest.fixture
def pending_subscription(db, center_email):
    sub, _payment_url = SubscriptionService.create_subscription(
        plan_id="profesional",
        email=center_email,
        center_name="Clinica Central",
        phone="+56 9 1234 5678",
        tax_id="76.123.456-7",
    )
    return sub


@pytest.fixture
def active_subscription(pending_subscription):
    """
    A center with a paid, currently valid subscription.
    """
    return SubscriptionService.confirm_payment(
        order_id=pending_subscription.order_id,
        payment_token="tok_test",
    )


@pytest.fixture
def entitlement(active_subscription, center_email):
    return require_entitlement(email=center_email)


@pytest.fixture
def incident_payload():
    return {
        "identity": "12345678-9",
        "given_name": "Ana",
        "family_name": "Soto",
        "incident_type": "physical_aggression",
        "description": "Golpeo a la enfermera de turno.",
        "incident_date": "2026-03-01",
    }
