# sr_core/subscriptions/plans.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Mapping

from sr_core.common.api.exceptions import UnknownPlan

UNLIMITED_RECORDS = -1
CURRENCY = "CLP"


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    price: int  # integer currency units
    duration_days: int
    record_limit: int  # UNLIMITED_RECORDS for no limit

    @property
    def is_unlimited(self) -> bool:
        return self.record_limit == UNLIMITED_RECORDS

    def as_dict(self) -> dict:
        data = asdict(self)
        data["currency"] = CURRENCY
        return data


PLANS: Mapping[str, Plan] = MappingProxyType({
    "basico": Plan(id="basico", name="Plan Básico", price=9990, duration_days=30, record_limit=50),
    "profesional": Plan(
        id="profesional", name="Plan Profesional", price=19990, duration_days=30, record_limit=UNLIMITED_RECORDS
    ),
    "empresa": Plan(id="empresa", name="Plan Empresa", price=49990, duration_days=30, record_limit=UNLIMITED_RECORDS),
})


def get_plan(plan_id: str) -> Plan:
    plan = PLANS.get(plan_id)
    if plan is None:
        raise UnknownPlan(f"Unknown plan '{plan_id}'. Valid plans: {', '.join(PLANS)}.")
    return plan
