# sr_core/patients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from sr_core.incidents.api.serializers import IncidentSerializer
from sr_core.patients.models import Patient


class PatientSearchSerializer(serializers.Serializer):
    fragment = serializers.RegexField(r"^\d{3}$", required=False, allow_blank=True, default="")
    # stored initials are the first character of each trimmed name
    initials = serializers.RegexField(r"^\S{2}$", required=False, allow_blank=True, default="")


class PatientMatchSerializer(serializers.ModelSerializer):
    """
    Search result. The full identity and names are never returned.
    """
    incident_count = serializers.IntegerField(read_only=True)
    incidents = IncidentSerializer(many=True, read_only=True)

    class Meta:
        model = Patient
        fields = [
            "id",
            "identity_fragment",
            "initials",
            "risk_tier",
            "incident_count",
            "incidents",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PatientSearchResultSerializer(serializers.Serializer):
    patients = PatientMatchSerializer(many=True)
