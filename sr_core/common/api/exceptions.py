# sr_core/common/api/exceptions.py
from __future__ import annotations

import logging
import uuid
from typing import Any

from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def ensure_request_id(request) -> str:
    """
    Ensures request has a stable request_id attribute and returns it.
    """
    rid = getattr(request, "request_id", None) if request is not None else None
    if not rid:
        rid = uuid.uuid4().hex
        if request is not None:
            setattr(request, "request_id", rid)
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Canonical error envelope: every failure is reported as kind + human-readable message.
    """
    rid = ensure_request_id(request)
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": rid,
        }
    }


# -------------------------------------------------------------------
# Domain error kinds
# -------------------------------------------------------------------

class InvalidIdentity(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Identity must contain at least 4 digits."
    default_code = "invalid_identity"


class MissingFields(APIException):
    """
    Raised with the list of absent fields; the list is surfaced as envelope details.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Required fields are missing."
    default_code = "missing_fields"

    def __init__(self, fields: list[str] | None = None, detail=None):
        self.fields = list(fields or [])
        if detail is None:
            detail = self.default_detail
            if self.fields:
                detail = f"Required fields are missing: {', '.join(self.fields)}."
        super().__init__(detail=detail, code=self.default_code)


class UnknownPlan(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Unknown plan."
    default_code = "unknown_plan"


class Unauthorized(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized. Provide the User-Email header."
    default_code = "unauthorized"


class SubscriptionRequired(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "An active subscription is required."
    default_code = "subscription_required"


class OrderNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Subscription order not found."
    default_code = "order_not_found"


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Storage is temporarily unavailable."
    default_code = "store_unavailable"


class ConflictError(APIException):
    """
    409 Conflict that still flows through the global exception handler.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None):
        super().__init__(detail=detail or self.default_detail, code=code or self.default_code)


class IdentifierConflict(ConflictError):
    """
    A generated order id / registration number hit the store's uniqueness constraint.
    Safe to retry: a fresh identifier is generated on the next attempt.
    """
    default_detail = "Generated identifier collided; retry the request."
    default_code = "identifier_conflict"


# Extra envelope details per kind (message stays in `detail`).
_DETAILS_FOR = {
    "subscription_required": {"subscription_required": True},
    "identifier_conflict": {"retryable": True},
    "store_unavailable": {"retryable": True},
}


def _code_for(exc: Exception, http_status: int) -> str:
    if isinstance(exc, ValidationError):
        return "validation_error"
    if isinstance(exc, NotAuthenticated):
        return "not_authenticated"
    if isinstance(exc, PermissionDenied):
        return "permission_denied"
    if isinstance(exc, Http404):
        return "not_found"
    if isinstance(exc, APIException):
        return getattr(exc, "default_code", "api_error") or "api_error"
    if http_status >= 500:
        return "server_error"
    return "error"


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")

    if isinstance(exc, DatabaseError):
        logger.exception("store failure while handling request", exc_info=exc)
        exc = StoreUnavailable()

    response = drf_exception_handler(exc, context)

    # Truly unhandled error
    if response is None:
        logger.exception("unhandled error while handling request", exc_info=exc)
        return Response(
            build_error_envelope(
                request=request,
                code="server_error",
                message="Unexpected server error.",
                details=None,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    http_status = response.status_code
    code = _code_for(exc, http_status)

    # DRF standardizes errors into response.data
    data = response.data

    # Message + details rules:
    # 1) If {"detail": "..."} only -> message=detail, details=None
    # 2) If {"detail": "...", ...} -> message=detail, details={...without detail}
    # 3) Otherwise -> message="Request failed.", details=data
    message = "Request failed."
    details = data

    if isinstance(data, dict) and "detail" in data:
        message = str(data.get("detail"))
        rest = {k: v for k, v in data.items() if k != "detail"}
        details = rest or None

    if isinstance(exc, MissingFields):
        details = {"fields": exc.fields}
    elif code in _DETAILS_FOR:
        details = dict(_DETAILS_FOR[code])

    return Response(
        build_error_envelope(
            request=request,
            code=code,
            message=message,
            details=details,
        ),
        status=http_status,
        headers=response.headers,
    )
