# sr_core/subscriptions/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from sr_core.subscriptions.models import SubscriptionStatus


class PlanSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    currency = serializers.CharField()
    duration_days = serializers.IntegerField()
    record_limit = serializers.IntegerField(help_text="-1 means unlimited.")


class PlanCatalogSerializer(serializers.Serializer):
    plans = serializers.DictField(child=PlanSerializer())


class SubscriptionCreateSerializer(serializers.Serializer):
    """
    Presence is checked by SubscriptionService (missing_fields error).
    """
    plan_id = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    center_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    tax_id = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    address = serializers.CharField(required=False, allow_blank=True, default="")


class SubscriptionCreatedSerializer(serializers.Serializer):
    order_id = serializers.CharField()
    payment_url = serializers.URLField()
    plan_id = serializers.CharField()
    amount = serializers.IntegerField()


class PaymentConfirmSerializer(serializers.Serializer):
    order_id = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    payment_token = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    payment_data = serializers.JSONField(required=False, default=dict)


class PaymentConfirmedSerializer(serializers.Serializer):
    registration_number = serializers.CharField(help_text="The confirmed commerce order id.")
    status = serializers.ChoiceField(choices=SubscriptionStatus.choices)
    expires_at = serializers.DateTimeField()


class SubscriptionStatusDetailSerializer(serializers.Serializer):
    plan_id = serializers.CharField()
    plan = serializers.CharField(source="plan_name")
    expires_at = serializers.DateTimeField()
    days_remaining = serializers.IntegerField()
    center_name = serializers.CharField()


class SubscriptionStatusSerializer(serializers.Serializer):
    active = serializers.BooleanField()
    subscription = SubscriptionStatusDetailSerializer(required=False)
