# sr_core/incidents/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from sr_core.incidents.models import Incident, SeverityTier
from sr_core.patients.models import RiskTier


class IncidentRegisterSerializer(serializers.Serializer):
    """
    Presence of required fields is checked by IncidentService (missing_fields error);
    this serializer only checks types and lengths.
    """
    identity = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    given_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    family_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    incident_type = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    incident_date = serializers.DateField(required=False, allow_null=True, default=None)
    center_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")


class IncidentRegisteredSerializer(serializers.Serializer):
    registration_number = serializers.CharField()
    severity = serializers.ChoiceField(choices=SeverityTier.choices)
    patient_risk_tier = serializers.ChoiceField(choices=RiskTier.choices)


class IncidentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Incident
        fields = [
            "id",
            "registration_number",
            "incident_type",
            "description",
            "incident_date",
            "severity",
            "center_name",
            "created_at",
        ]
        read_only_fields = fields
