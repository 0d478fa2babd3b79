# sr_core/patients/admin.py
from django.contrib import admin

from sr_core.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "initials",
        "identity_fragment",
        "risk_tier",
        "created_at",
        "updated_at",
    )
    list_filter = ("risk_tier",)
    search_fields = ("identity_fragment", "initials")
    readonly_fields = ("identity_fragment", "initials", "risk_tier", "created_at", "updated_at")
    ordering = ("-created_at",)
