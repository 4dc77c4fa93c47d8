from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal


OrderStatus = Literal["pending", "paid", "cancelled"]

ORDER_STATUSES: frozenset[str] = frozenset({"pending", "paid", "cancelled"})


@dataclass(frozen=True)
class Order:
    id: str
    user_id: str
    plan_id: str
    amount: Decimal
    status: OrderStatus
    payment_method: str | None
    pix_code: str | None
    vps_id: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class OrderListItem:
    order: Order
    plan_name: str
    plan_ram: str
    plan_cpu: str
    plan_storage: str
    plan_price: Decimal
    owner_name: str | None
    owner_email: str | None
