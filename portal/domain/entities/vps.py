from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal


VpsStatus = Literal["pending", "active", "suspended"]


@dataclass(frozen=True)
class Vps:
    id: str
    user_id: str
    plan_id: str
    name: str
    status: VpsStatus
    ip_address: str | None
    control_panel_url: str | None
    remote_access_url: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class VpsListItem:
    vps: Vps
    plan_name: str
    plan_ram: str
    plan_cpu: str
    plan_storage: str
    plan_price: Decimal
    owner_name: str | None
    owner_email: str | None


@dataclass(frozen=True)
class VpsProvisioning:
    """Dados do registro de VPS criado junto com a aprovacao do pedido."""

    vps_id: str
    name: str
    status: VpsStatus
    ip_address: str
    control_panel_url: str
    remote_access_url: str
