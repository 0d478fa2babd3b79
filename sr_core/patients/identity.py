# sr_core/patients/identity.py
"""
Identity matcher rules.

A patient is stored under the identity string exactly as reported (trimmed).
For lookups that must not expose the full identifier, a 3-digit fragment
plus two initials are used instead:

    "12.345.678-9" -> digits "123456789" -> fragment "678"
    ("Ana", "Soto") -> "AS"
    ("Ana", "")     -> "AX"
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from sr_core.common.api.exceptions import InvalidIdentity, MissingFields

FRAGMENT_LENGTH = 3
MISSING_FAMILY_INITIAL = "X"

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class NormalizedIdentity:
    full_identity: str
    digits: str
    fragment: str


def normalize_identity(raw: str | None) -> NormalizedIdentity:
    full_identity = (raw or "").strip()
    digits = _NON_DIGITS.sub("", full_identity)

    # fragment ends one position before the last digit (the check digit)
    if len(digits) < FRAGMENT_LENGTH + 1:
        raise InvalidIdentity()

    fragment = digits[-(FRAGMENT_LENGTH + 1):-1]
    return NormalizedIdentity(full_identity=full_identity, digits=digits, fragment=fragment)


def _initial(name: str) -> str:
    return name[0].upper()[0]


def derive_initials(given_name: str | None, family_name: str | None = None) -> str:
    given = (given_name or "").strip()
    if not given:
        raise MissingFields(["given_name"])

    family = (family_name or "").strip()
    return _initial(given) + (_initial(family) if family else MISSING_FAMILY_INITIAL)
