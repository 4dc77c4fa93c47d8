from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from portal.domain.entities.order import Order, OrderListItem
from portal.domain.entities.vps import Vps, VpsListItem

from .catalog_mapper import as_decimal


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def map_row_to_order(row: Mapping[str, Any]) -> Order:
    return Order(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        plan_id=str(row["plan_id"]),
        amount=as_decimal(row["amount"]),
        status=row["status"],
        payment_method=row.get("payment_method"),
        pix_code=row.get("pix_code"),
        vps_id=_as_optional_str(row.get("vps_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_order_list_item(row: Mapping[str, Any]) -> OrderListItem:
    return OrderListItem(
        order=map_row_to_order(row),
        plan_name=row["plan_name"],
        plan_ram=row["plan_ram"],
        plan_cpu=row["plan_cpu"],
        plan_storage=row["plan_storage"],
        plan_price=as_decimal(row["plan_price"]),
        owner_name=row.get("owner_name"),
        owner_email=row.get("owner_email"),
    )


def map_row_to_vps(row: Mapping[str, Any]) -> Vps:
    return Vps(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        plan_id=str(row["plan_id"]),
        name=row["name"],
        status=row["status"],
        ip_address=row.get("ip_address"),
        control_panel_url=row.get("control_panel_url"),
        remote_access_url=row.get("remote_access_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_vps_list_item(row: Mapping[str, Any]) -> VpsListItem:
    return VpsListItem(
        vps=map_row_to_vps(row),
        plan_name=row["plan_name"],
        plan_ram=row["plan_ram"],
        plan_cpu=row["plan_cpu"],
        plan_storage=row["plan_storage"],
        plan_price=as_decimal(row["plan_price"]),
        owner_name=row.get("owner_name"),
        owner_email=row.get("owner_email"),
    )
