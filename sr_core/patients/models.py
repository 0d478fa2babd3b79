# sr_core/patients/models.py
from django.db import models

from sr_core.common.models import UUIDModel


class RiskTier(models.TextChoices):
    LOW = "LOW", "Low"
    MEDIUM = "MEDIUM", "Medium"
    HIGH = "HIGH", "High"


class Patient(UUIDModel):
    """
    A patient referenced by at least one incident.

    Looked up by the exact identity string on registration, and by
    (identity_fragment, initials) for privacy-preserving search.
    risk_tier is written only by RiskService.
    """
    full_identity = models.CharField(max_length=32, unique=True)
    identity_fragment = models.CharField(max_length=3)
    given_name = models.CharField(max_length=100)
    family_name = models.CharField(max_length=100, blank=True, default="")
    initials = models.CharField(max_length=2)

    risk_tier = models.CharField(max_length=10, choices=RiskTier.choices, default=RiskTier.LOW)

    class Meta:
        db_table = "patients_patient"
        indexes = [
            models.Index(fields=["identity_fragment", "initials"], name="patient_fragment_initials_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.initials} ***{self.identity_fragment}* ({self.risk_tier})"
