# sr_core/subscriptions/models.py
from __future__ import annotations

from django.db import models
from django.utils import timezone

from sr_core.common.models import UUIDModel


class SubscriptionStatus(models.TextChoices):
    """
    Stored states only. "expired" is derived at read time (active and expires_at <= now).
    """
    PENDING = "pending", "Pending"
    ACTIVE = "active", "Active"


EXPIRED = "expired"


class MedicalCenter(UUIDModel):
    """
    Subscriber identity, keyed by email. Created on the first subscription request.
    """
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=200)
    tax_id = models.CharField(max_length=20, blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")

    plan_id = models.CharField(max_length=50, blank=True, default="")
    subscription_active = models.BooleanField(default=False, db_index=True)

    class Meta:
        db_table = "subscriptions_medical_center"

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class Subscription(UUIDModel):
    """
    One purchase attempt: pending until the payment callback confirms it, then active once.
    """
    center = models.ForeignKey(MedicalCenter, on_delete=models.PROTECT, related_name="subscriptions")

    order_id = models.CharField(max_length=100, unique=True)
    plan_id = models.CharField(max_length=50)
    email = models.EmailField()  # denormalized from center for entitlement lookups
    amount = models.PositiveIntegerField()

    status = models.CharField(
        max_length=16,
        choices=SubscriptionStatus.choices,
        default=SubscriptionStatus.PENDING,
        db_index=True,
    )

    started_at = models.DateTimeField(default=timezone.now)
    activated_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField(null=True, blank=True)

    payment_token = models.CharField(max_length=200, blank=True, default="")
    payment_data = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "subscriptions_subscription"
        indexes = [
            models.Index(fields=["email"], name="subscription_email_idx"),
            models.Index(fields=["email", "status", "expires_at"], name="subscription_entitlement_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.order_id} ({self.plan_id}, {self.status})"

    def is_expired(self, now=None) -> bool:
        if self.status != SubscriptionStatus.ACTIVE or self.expires_at is None:
            return False
        return self.expires_at <= (now or timezone.now())

    def effective_status(self, now=None) -> str:
        return EXPIRED if self.is_expired(now) else self.status
