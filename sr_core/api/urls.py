# sr_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from sr_core.common.api.views import HealthView
from sr_core.incidents.api.views import IncidentViewSet
from sr_core.patients.api.views import PatientViewSet
from sr_core.subscriptions.api.views import PlanListView, SubscriptionViewSet

router = DefaultRouter()

router.register(r"patients", PatientViewSet, basename="patients")
router.register(r"incidents", IncidentViewSet, basename="incidents")
router.register(r"subscriptions", SubscriptionViewSet, basename="subscriptions")

urlpatterns = [
    path("health/", HealthView.as_view(), name="health"),
    path("plans/", PlanListView.as_view(), name="plans"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
