from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from portal.domain.entities.plan import Plan


def as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _as_features(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(str(item) for item in value)


def map_row_to_plan(row: Mapping[str, Any]) -> Plan:
    return Plan(
        id=str(row["id"]),
        name=row["name"],
        price=as_decimal(row["price"]),
        ram=row["ram"],
        cpu=row["cpu"],
        storage=row["storage"],
        features=_as_features(row.get("features")),
        is_active=bool(row["is_active"]),
        is_popular=bool(row["is_popular"]),
        created_at=row["created_at"],
    )
