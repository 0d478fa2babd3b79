# sr_core/patients/risk.py
from __future__ import annotations

from sr_core.patients.models import RiskTier

HIGH_RISK_MIN_INCIDENTS = 3
MEDIUM_RISK_INCIDENTS = 2


def escalate(incident_count: int) -> str:
    """
    Risk tier from the patient's total incident count.
    Stateless: recomputed from scratch after every registration.
    """
    if incident_count >= HIGH_RISK_MIN_INCIDENTS:
        return RiskTier.HIGH
    if incident_count == MEDIUM_RISK_INCIDENTS:
        return RiskTier.MEDIUM
    return RiskTier.LOW
