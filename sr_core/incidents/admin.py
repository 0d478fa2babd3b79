# sr_core/incidents/admin.py
from django.contrib import admin

from sr_core.incidents.models import Incident


@admin.register(Incident)
class IncidentAdmin(admin.ModelAdmin):
    list_display = (
        "registration_number",
        "incident_type",
        "severity",
        "incident_date",
        "center_name",
        "reported_by_email",
        "created_at",
    )
    list_filter = ("severity", "incident_type")
    search_fields = ("registration_number", "center_name", "reported_by_email")
    readonly_fields = ("severity", "registration_number", "created_at")
    ordering = ("-created_at",)
