# sr_core/subscriptions/services.py
from __future__ import annotations

import logging
from datetime import timedelta
from urllib.parse import urlencode

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from sr_core.audit.services import AuditService
from sr_core.common.api.exceptions import IdentifierConflict, OrderNotFound
from sr_core.common.identifiers import new_order_id
from sr_core.common.validation import normalize_email, require_fields
from sr_core.subscriptions.models import MedicalCenter, Subscription, SubscriptionStatus
from sr_core.subscriptions.plans import get_plan
from sr_core.subscriptions.selectors import centers_with_lapsed_entitlement, get_center_by_email

logger = logging.getLogger(__name__)


def build_payment_url(order_id: str) -> str:
    base = settings.PUBLIC_BASE_URL.rstrip("/")
    path = settings.PAYMENT_SIMULATION_PATH
    return f"{base}{path}?{urlencode({'order': order_id})}"


class SubscriptionService:
    """
    Subscription lifecycle: pending -> active (once, via payment confirmation).
    """

    @staticmethod
    def _get_or_create_center(
        *,
        email: str,
        center_name: str,
        phone: str,
        tax_id: str,
        address: str,
        plan_id: str,
    ) -> MedicalCenter:
        center = get_center_by_email(email=email)
        if center is not None:
            return center

        try:
            with transaction.atomic():
                return MedicalCenter.objects.create(
                    email=email,
                    name=center_name,
                    phone=phone,
                    tax_id=tax_id,
                    address=address,
                    plan_id=plan_id,
                )
        except IntegrityError:
            return MedicalCenter.objects.get(email=email)

    @staticmethod
    @transaction.atomic
    def create_subscription(
        *,
        plan_id: str,
        email: str,
        center_name: str,
        phone: str,
        tax_id: str = "",
        address: str = "",
    ) -> tuple[Subscription, str]:
        """
        Inserts a pending subscription for the plan price.
        Returns (subscription, payment_url); the URL carries the order id.
        """
        require_fields(email=email, center_name=center_name, phone=phone)
        plan = get_plan((plan_id or "").strip())
        email = normalize_email(email)

        center = SubscriptionService._get_or_create_center(
            email=email,
            center_name=center_name.strip(),
            phone=phone.strip(),
            tax_id=(tax_id or "").strip(),
            address=(address or "").strip(),
            plan_id=plan.id,
        )

        order_id = new_order_id()
        try:
            with transaction.atomic():
                sub = Subscription.objects.create(
                    center=center,
                    order_id=order_id,
                    plan_id=plan.id,
                    email=email,
                    amount=plan.price,
                    status=SubscriptionStatus.PENDING,
                )
        except IntegrityError:
            logger.warning("order id collision order_id=%s", order_id)
            raise IdentifierConflict()

        AuditService.log(
            event_code="subscription.created",
            entity_type="Subscription",
            entity_id=sub.id,
            actor_email=email,
            metadata={"order_id": order_id, "plan_id": plan.id, "amount": plan.price},
        )
        logger.info("subscription created order_id=%s plan=%s", order_id, plan.id)
        return sub, build_payment_url(order_id)

    @staticmethod
    @transaction.atomic
    def confirm_payment(
        *,
        order_id: str,
        payment_token: str = "",
        payment_data: dict | None = None,
    ) -> Subscription:
        """
        Payment-provider callback. The token is stored, not verified.

        Idempotent: confirming an already-active order changes nothing and
        returns the subscription as it is.
        """
        require_fields(order_id=order_id)

        try:
            sub = (
                Subscription.objects.select_for_update()
                .select_related("center")
                .get(order_id=order_id.strip())
            )
        except Subscription.DoesNotExist:
            raise OrderNotFound()

        if sub.status == SubscriptionStatus.ACTIVE:
            logger.warning("duplicate payment confirmation order_id=%s", sub.order_id)
            return sub

        plan = get_plan(sub.plan_id)
        now = timezone.now()

        sub.status = SubscriptionStatus.ACTIVE
        sub.activated_at = now
        sub.expires_at = now + timedelta(days=plan.duration_days)
        sub.payment_token = payment_token or ""
        sub.payment_data = payment_data or {}
        sub.save(
            update_fields=[
                "status",
                "activated_at",
                "expires_at",
                "payment_token",
                "payment_data",
                "updated_at",
            ]
        )

        center = sub.center
        center.subscription_active = True
        center.plan_id = sub.plan_id
        center.save(update_fields=["subscription_active", "plan_id", "updated_at"])

        AuditService.log(
            event_code="subscription.activated",
            entity_type="Subscription",
            entity_id=sub.id,
            actor_email=sub.email,
            metadata={"order_id": sub.order_id, "expires_at": sub.expires_at.isoformat()},
        )
        logger.info("subscription activated order_id=%s expires_at=%s", sub.order_id, sub.expires_at.isoformat())
        return sub

    @staticmethod
    @transaction.atomic
    def refresh_center_entitlements(*, now=None, dry_run: bool = False) -> list[MedicalCenter]:
        """
        Clears subscription_active on centers whose subscriptions have all expired.
        """
        lapsed = list(centers_with_lapsed_entitlement(now=now))
        if not dry_run and lapsed:
            MedicalCenter.objects.filter(id__in=[c.id for c in lapsed]).update(
                subscription_active=False,
                updated_at=timezone.now(),
            )
            logger.info("cleared entitlement flag on %d center(s)", len(lapsed))
        return lapsed
