# sr_core/patients/selectors.py
from __future__ import annotations

from django.db.models import Count, Prefetch, QuerySet

from sr_core.incidents.models import Incident
from sr_core.patients.models import Patient


def get_patient_by_identity(*, full_identity: str) -> Patient | None:
    return Patient.objects.filter(full_identity=full_identity.strip()).first()


def search_patients(*, fragment: str, initials: str) -> QuerySet[Patient]:
    """
    Privacy-preserving lookup: exact 3-digit fragment, case-insensitive initials.
    Each patient carries `incident_count` and `incidents` (most recent date first).
    """
    incidents = Incident.objects.order_by("-incident_date", "-created_at")

    return (
        Patient.objects.filter(identity_fragment=fragment.strip(), initials__iexact=initials.strip())
        .annotate(incident_count=Count("incidents"))
        .prefetch_related(Prefetch("incidents", queryset=incidents))
        .order_by("-updated_at")
    )
