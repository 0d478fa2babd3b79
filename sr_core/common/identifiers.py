# sr_core/common/identifiers.py
from __future__ import annotations

import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def _millis() -> int:
    return int(time.time() * 1000)


def _random_token(length: int) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def new_order_id() -> str:
    """
    Commerce order id: SUB-<epoch millis>-<9 random base36 chars>.
    Uniqueness is enforced by the store; the random part makes collisions negligible.
    """
    return f"SUB-{_millis()}-{_random_token(9)}"


def new_registration_number() -> str:
    """
    Incident registration number: INC-<epoch millis>-<6 random base36 chars, upper-cased>.
    """
    return f"INC-{_millis()}-{_random_token(6).upper()}"
