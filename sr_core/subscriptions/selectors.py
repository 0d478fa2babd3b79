# sr_core/subscriptions/selectors.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from django.db.models import QuerySet
from django.utils import timezone

from sr_core.subscriptions.models import MedicalCenter, Subscription, SubscriptionStatus
from sr_core.subscriptions.plans import PLANS


def get_center_by_email(*, email: str) -> MedicalCenter | None:
    return MedicalCenter.objects.filter(email=email).first()


def active_subscription_for_email(*, email: str, now: datetime | None = None) -> Subscription | None:
    """
    Most recent active, non-expired subscription for the email (latest expiry wins).
    """
    now = now or timezone.now()
    return (
        Subscription.objects.select_related("center")
        .filter(email=email, status=SubscriptionStatus.ACTIVE, expires_at__gt=now)
        .order_by("-expires_at", "-activated_at")
        .first()
    )


@dataclass(frozen=True)
class SubscriptionStatusView:
    active: bool
    plan_id: str | None = None
    plan_name: str | None = None
    expires_at: datetime | None = None
    days_remaining: int | None = None
    center_name: str | None = None


def subscription_status(*, email: str, now: datetime | None = None) -> SubscriptionStatusView:
    now = now or timezone.now()
    sub = active_subscription_for_email(email=email, now=now)
    if sub is None:
        return SubscriptionStatusView(active=False)

    plan = PLANS.get(sub.plan_id)
    return SubscriptionStatusView(
        active=True,
        plan_id=sub.plan_id,
        plan_name=plan.name if plan else sub.plan_id,
        expires_at=sub.expires_at,
        # timedelta.days floors to whole days
        days_remaining=(sub.expires_at - now).days,
        center_name=sub.center.name,
    )


def centers_with_lapsed_entitlement(*, now: datetime | None = None) -> QuerySet[MedicalCenter]:
    """
    Centers still flagged active that no longer hold any active, non-expired subscription.
    """
    now = now or timezone.now()
    live_center_ids = Subscription.objects.filter(
        status=SubscriptionStatus.ACTIVE,
        expires_at__gt=now,
    ).values("center_id")
    return MedicalCenter.objects.filter(subscription_active=True).exclude(id__in=live_center_ids)
