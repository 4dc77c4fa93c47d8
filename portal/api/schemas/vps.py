from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from portal.api.schemas.common import StatusBadgeResponse, status_badge
from portal.domain.entities.vps import Vps, VpsListItem


class VpsResponse(BaseModel):
    id: str
    user_id: str
    plan_id: str
    name: str
    status: str
    status_badge: StatusBadgeResponse
    ip_address: str | None
    control_panel_url: str | None
    remote_access_url: str | None
    created_at: datetime
    updated_at: datetime


class VpsListItemResponse(VpsResponse):
    plan_name: str
    plan_ram: str
    plan_cpu: str
    plan_storage: str
    plan_price: Decimal
    owner_name: str | None
    owner_email: str | None


def _vps_fields(vps: Vps) -> dict:
    return {
        "id": vps.id,
        "user_id": vps.user_id,
        "plan_id": vps.plan_id,
        "name": vps.name,
        "status": vps.status,
        "status_badge": status_badge(vps.status),
        "ip_address": vps.ip_address,
        "control_panel_url": vps.control_panel_url,
        "remote_access_url": vps.remote_access_url,
        "created_at": vps.created_at,
        "updated_at": vps.updated_at,
    }


def vps_response(vps: Vps) -> VpsResponse:
    return VpsResponse(**_vps_fields(vps))


def vps_list_item_response(item: VpsListItem) -> VpsListItemResponse:
    return VpsListItemResponse(
        **_vps_fields(item.vps),
        plan_name=item.plan_name,
        plan_ram=item.plan_ram,
        plan_cpu=item.plan_cpu,
        plan_storage=item.plan_storage,
        plan_price=item.plan_price,
        owner_name=item.owner_name,
        owner_email=item.owner_email,
    )
