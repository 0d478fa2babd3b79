# sr_core/patients/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from sr_core.common.validation import require_fields
from sr_core.patients.api.serializers import (
    PatientMatchSerializer,
    PatientSearchResultSerializer,
    PatientSearchSerializer,
)
from sr_core.patients.models import Patient
from sr_core.patients.selectors import search_patients


class PatientViewSet(viewsets.ViewSet):
    serializer_class = PatientMatchSerializer
    queryset = Patient.objects.none()

    @extend_schema(
        request=PatientSearchSerializer,
        responses={200: PatientSearchResultSerializer},
        tags=["Patients"],
        operation_id="v1_patients_search",
    )
    @action(detail=False, methods=["post"], url_path="search")
    def search(self, request):
        ser = PatientSearchSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        require_fields(fragment=data["fragment"], initials=data["initials"])

        qs = search_patients(fragment=data["fragment"], initials=data["initials"])
        return Response(
            {"patients": PatientMatchSerializer(qs, many=True).data},
            status=status.HTTP_200_OK,
        )
