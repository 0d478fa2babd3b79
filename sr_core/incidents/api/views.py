# sr_core/incidents/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from sr_core.common.idempotency import get_key, load_response, save_response
from sr_core.incidents.api.serializers import IncidentRegisteredSerializer, IncidentRegisterSerializer
from sr_core.incidents.models import Incident
from sr_core.incidents.services import IncidentService
from sr_core.subscriptions.entitlement import HDR_USER_EMAIL, require_entitlement, resolve_caller_email


class IncidentViewSet(viewsets.ViewSet):
    """
    Thin API layer:
    - entitlement gate (caller email -> active subscription)
    - idempotency caching
    - serializer validation
    - delegates the write to IncidentService
    """

    serializer_class = IncidentRegisterSerializer
    queryset = Incident.objects.none()

    @extend_schema(
        request=IncidentRegisterSerializer,
        responses={201: IncidentRegisteredSerializer},
        tags=["Incidents"],
        parameters=[
            OpenApiParameter(name=HDR_USER_EMAIL, location=OpenApiParameter.HEADER, required=True, type=str),
            OpenApiParameter(name="Idempotency-Key", location=OpenApiParameter.HEADER, required=False, type=str),
        ],
        operation_id="v1_incidents_register",
    )
    def create(self, request):
        # Gate first: an unentitled caller gets subscription_required before any validation or write.
        entitlement = require_entitlement(email=resolve_caller_email(request))

        idem = get_key(request)
        if idem:
            cached = load_response(entitlement.email, request.method, request.path, idem)
            if cached is not None:
                data, status_code = cached
                return Response(data, status=status_code)

        ser = IncidentRegisterSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        incident = IncidentService.register_incident(entitlement=entitlement, **ser.validated_data)

        out = IncidentRegisteredSerializer(
            {
                "registration_number": incident.registration_number,
                "severity": incident.severity,
                "patient_risk_tier": incident.patient.risk_tier,
            }
        ).data

        if idem:
            save_response(entitlement.email, request.method, request.path, idem, out, status.HTTP_201_CREATED)

        return Response(out, status=status.HTTP_201_CREATED)
