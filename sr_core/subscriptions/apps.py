# sr_core/subscriptions/apps.py
from django.apps import AppConfig


class SubscriptionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sr_core.subscriptions"
    label = "subscriptions"
