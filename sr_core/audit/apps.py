# sr_core/audit/apps.py
from django.apps import AppConfig


class AuditConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sr_core.audit"
    label = "audit"
