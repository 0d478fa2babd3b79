# sr_core/subscriptions/entitlement.py
"""
Entitlement gate evaluated before incident registration.

The caller is identified only by email (User-Email header, or the
`user_email` payload field). The resolved Entitlement is passed explicitly
to the registration service instead of being stashed on the request.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sr_core.common.api.exceptions import SubscriptionRequired, Unauthorized
from sr_core.common.validation import normalize_email
from sr_core.subscriptions.selectors import active_subscription_for_email

HDR_USER_EMAIL = "User-Email"
USER_EMAIL_FIELD = "user_email"


@dataclass(frozen=True)
class Entitlement:
    email: str
    subscription_id: UUID
    order_id: str
    plan_id: str
    center_name: str
    expires_at: datetime


def resolve_caller_email(request) -> str:
    """
    Header first, then payload field. Returns "" when neither is present.
    """
    email = request.headers.get(HDR_USER_EMAIL)
    if not email:
        data = getattr(request, "data", None)
        if hasattr(data, "get"):
            email = data.get(USER_EMAIL_FIELD)
    return normalize_email(email if isinstance(email, str) else "")


def require_entitlement(*, email: str | None, now: datetime | None = None) -> Entitlement:
    email = normalize_email(email)
    if not email:
        raise Unauthorized()

    sub = active_subscription_for_email(email=email, now=now)
    if sub is None:
        raise SubscriptionRequired()

    return Entitlement(
        email=email,
        subscription_id=sub.id,
        order_id=sub.order_id,
        plan_id=sub.plan_id,
        center_name=sub.center.name,
        expires_at=sub.expires_at,
    )
