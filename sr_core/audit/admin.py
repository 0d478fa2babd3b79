# sr_core/audit/admin.py
from django.contrib import admin

from sr_core.audit.models import AuditEvent


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ("occurred_at", "event_code", "entity_type", "entity_id", "actor_email")
    list_filter = ("event_code", "entity_type")
    search_fields = ("event_code", "entity_id", "actor_email")
    readonly_fields = ("occurred_at",)
    ordering = ("-occurred_at",)

    def has_change_permission(self, request, obj=None):
        return False
