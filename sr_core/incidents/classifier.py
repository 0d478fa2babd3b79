# sr_core/incidents/classifier.py
from __future__ import annotations

from sr_core.incidents.models import IncidentType, SeverityTier

HIGH_SEVERITY_TYPES = frozenset({
    IncidentType.PHYSICAL_AGGRESSION.value,
    IncidentType.THREATS.value,
})

MEDIUM_SEVERITY_TYPES = frozenset({
    IncidentType.VERBAL_AGGRESSION.value,
    IncidentType.AGGRESSIVE_BEHAVIOR.value,
    IncidentType.THREATENED_LAWSUIT.value,
})


def classify(incident_type: str) -> str:
    if incident_type in HIGH_SEVERITY_TYPES:
        return SeverityTier.HIGH
    if incident_type in MEDIUM_SEVERITY_TYPES:
        return SeverityTier.MEDIUM
    # Unmapped codes are accepted, not rejected.
    return SeverityTier.LOW
