from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from portal.domain.entities.plan import Plan


class PlanResponse(BaseModel):
    id: str
    name: str
    price: Decimal
    ram: str
    cpu: str
    storage: str
    features: list[str]
    is_active: bool
    is_popular: bool
    created_at: datetime


def plan_response(plan: Plan) -> PlanResponse:
    return PlanResponse(
        id=plan.id,
        name=plan.name,
        price=plan.price,
        ram=plan.ram,
        cpu=plan.cpu,
        storage=plan.storage,
        features=list(plan.features),
        is_active=plan.is_active,
        is_popular=plan.is_popular,
        created_at=plan.created_at,
    )
