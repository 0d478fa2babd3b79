# sr_core/incidents/models.py
import uuid

from django.db import models

from sr_core.patients.models import Patient


class SeverityTier(models.TextChoices):
    LOW = "LOW", "Low"
    MEDIUM = "MEDIUM", "Medium"
    HIGH = "HIGH", "High"


class IncidentType(models.TextChoices):
    """
    Known incident-type codes. The incident_type column is free text:
    codes outside this list are stored as reported and graded LOW.
    """
    PHYSICAL_AGGRESSION = "physical_aggression", "Physical aggression"
    THREATS = "threats", "Threats"
    VERBAL_AGGRESSION = "verbal_aggression", "Verbal aggression"
    AGGRESSIVE_BEHAVIOR = "aggressive_behavior", "Aggressive behavior"
    THREATENED_LAWSUIT = "threatened_lawsuit", "Threatened lawsuit"


class Incident(models.Model):
    """
    Append-only incident log entry. Severity is fixed at creation.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="incidents")

    incident_type = models.CharField(max_length=100)
    description = models.TextField()
    incident_date = models.DateField()
    severity = models.CharField(max_length=10, choices=SeverityTier.choices)

    center_name = models.CharField(max_length=200, blank=True, default="")
    registration_number = models.CharField(max_length=50, unique=True)
    reported_by_email = models.EmailField()

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "incidents_incident"
        indexes = [
            models.Index(fields=["patient", "incident_date"], name="incident_patient_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.registration_number} ({self.incident_type}, {self.severity})"
