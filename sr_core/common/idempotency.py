# sr_core/common/idempotency.py
from __future__ import annotations

from django.db import IntegrityError, transaction

from sr_core.common.models import IdempotencyRecord


def get_key(request):
    # In DRF test client: "HTTP_IDEMPOTENCY_KEY" becomes request.META["HTTP_IDEMPOTENCY_KEY"]
    return request.META.get("HTTP_IDEMPOTENCY_KEY")


def load_response(actor_email, method, path, key):
    if not key:
        return None

    rec = (
        IdempotencyRecord.objects.filter(
            actor_email=actor_email,
            method=method.upper(),
            path=path,
            idempotency_key=str(key),
        )
        .order_by("-created_at")
        .first()
    )
    return None if rec is None else (rec.response_data, rec.status_code)


def save_response(actor_email, method, path, key, response_data, status_code: int = 200):
    if not key:
        return

    try:
        with transaction.atomic():
            IdempotencyRecord.objects.create(
                actor_email=actor_email,
                method=method.upper(),
                path=path,
                idempotency_key=str(key),
                status_code=int(status_code),
                response_data=response_data,
            )
    except IntegrityError:
        # already saved by a concurrent request
        return
