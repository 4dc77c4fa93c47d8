from __future__ import annotations

import random
from uuid import uuid4

from portal.domain.entities.vps import VpsProvisioning


def generate_placeholder_ip(rng: random.Random | None = None) -> str:
    """IP provisorio 192.168.x.y, sem checagem de colisao com VPS existentes."""
    source = rng or random
    return f"192.168.{source.randrange(255)}.{source.randrange(255)}"


def build_vps_name(*, plan_name: str, owner_name: str | None, owner_email: str | None) -> str:
    owner = (owner_name or "").strip() or (owner_email or "").strip() or "cliente"
    return f"{plan_name} - {owner}"


def build_vps_provisioning(
    *,
    plan_name: str,
    owner_name: str | None,
    owner_email: str | None,
    control_panel_url: str,
    remote_access_url: str,
    rng: random.Random | None = None,
) -> VpsProvisioning:
    return VpsProvisioning(
        vps_id=str(uuid4()),
        name=build_vps_name(plan_name=plan_name, owner_name=owner_name, owner_email=owner_email),
        status="active",
        ip_address=generate_placeholder_ip(rng),
        control_panel_url=control_panel_url,
        remote_access_url=remote_access_url,
    )
