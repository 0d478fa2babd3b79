# sr_core/common/api/views.py
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    @extend_schema(tags=["Health"], responses={200: dict}, operation_id="health")
    def get(self, request):
        return Response({"status": "ok", "timestamp": timezone.now()})
