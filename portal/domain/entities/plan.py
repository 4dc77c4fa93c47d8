from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    price: Decimal
    ram: str
    cpu: str
    storage: str
    features: tuple[str, ...]
    is_active: bool
    is_popular: bool
    created_at: datetime
