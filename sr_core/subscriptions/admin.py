# sr_core/subscriptions/admin.py
from django.contrib import admin

from sr_core.subscriptions.models import MedicalCenter, Subscription


@admin.register(MedicalCenter)
class MedicalCenterAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "plan_id", "subscription_active", "created_at")
    list_filter = ("subscription_active", "plan_id")
    search_fields = ("name", "email", "tax_id")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ("order_id", "email", "plan_id", "amount", "status", "activated_at", "expires_at")
    list_filter = ("status", "plan_id")
    search_fields = ("order_id", "email")
    readonly_fields = ("order_id", "created_at", "updated_at")
    ordering = ("-created_at",)
