# sr_core/subscriptions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from sr_core.common.validation import normalize_email
from sr_core.subscriptions.api.serializers import (
    PaymentConfirmedSerializer,
    PaymentConfirmSerializer,
    PlanCatalogSerializer,
    PlanSerializer,
    SubscriptionCreatedSerializer,
    SubscriptionCreateSerializer,
    SubscriptionStatusDetailSerializer,
    SubscriptionStatusSerializer,
)
from sr_core.subscriptions.models import Subscription
from sr_core.subscriptions.plans import PLANS
from sr_core.subscriptions.selectors import subscription_status
from sr_core.subscriptions.services import SubscriptionService


class PlanListView(APIView):
    @extend_schema(tags=["Subscriptions"], responses={200: PlanCatalogSerializer}, operation_id="v1_plans_list")
    def get(self, request):
        plans = {plan_id: PlanSerializer(plan.as_dict()).data for plan_id, plan in PLANS.items()}
        return Response({"plans": plans}, status=status.HTTP_200_OK)


class SubscriptionViewSet(viewsets.ViewSet):
    """
    - create: pending subscription + payment URL
    - confirm: payment provider callback (pending -> active)
    - status: entitlement view by email
    """
    serializer_class = SubscriptionCreateSerializer
    queryset = Subscription.objects.none()

    @extend_schema(
        tags=["Subscriptions"],
        request=SubscriptionCreateSerializer,
        responses={201: SubscriptionCreatedSerializer},
        operation_id="v1_subscriptions_create",
    )
    def create(self, request):
        ser = SubscriptionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        sub, payment_url = SubscriptionService.create_subscription(**ser.validated_data)

        out = SubscriptionCreatedSerializer(
            {
                "order_id": sub.order_id,
                "payment_url": payment_url,
                "plan_id": sub.plan_id,
                "amount": sub.amount,
            }
        ).data
        return Response(out, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Subscriptions"],
        request=PaymentConfirmSerializer,
        responses={200: PaymentConfirmedSerializer},
        operation_id="v1_subscriptions_confirm",
    )
    @action(detail=False, methods=["post"], url_path="confirm")
    def confirm(self, request):
        ser = PaymentConfirmSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        sub = SubscriptionService.confirm_payment(
            order_id=data["order_id"],
            payment_token=data["payment_token"],
            payment_data=data["payment_data"],
        )

        out = PaymentConfirmedSerializer(
            {
                "registration_number": sub.order_id,
                "status": sub.status,
                "expires_at": sub.expires_at,
            }
        ).data
        return Response(out, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Subscriptions"],
        responses={200: SubscriptionStatusSerializer},
        operation_id="v1_subscriptions_status",
    )
    @action(detail=False, methods=["get"], url_path=r"status/(?P<email>[^/]+)")
    def status_for_email(self, request, email=None):
        view = subscription_status(email=normalize_email(email))

        if not view.active:
            return Response({"active": False}, status=status.HTTP_200_OK)

        return Response(
            {"active": True, "subscription": SubscriptionStatusDetailSerializer(view).data},
            status=status.HTTP_200_OK,
        )
