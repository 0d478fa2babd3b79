# sr_core/common/validation.py
from __future__ import annotations

from sr_core.common.api.exceptions import MissingFields


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(**values) -> None:
    """
    require_fields(email=email, phone=phone) -> raises MissingFields(["phone"]) if phone is blank.
    Field order in the error follows keyword order.
    """
    missing = [name for name, value in values.items() if _is_blank(value)]
    if missing:
        raise MissingFields(missing)


def normalize_email(value: str | None) -> str:
    """
    Emails key centers and subscriptions; compare them trimmed and lower-cased.
    """
    return (value or "").strip().lower()
