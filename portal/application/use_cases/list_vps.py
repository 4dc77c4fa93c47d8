from __future__ import annotations

from portal.application.ports.vps_port import VpsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.vps import VpsListItem


class ListVpsUseCase:
    def __init__(self, *, vps_port: VpsPort):
        self._vps_port = vps_port

    def execute(self, *, actor: Actor) -> list[VpsListItem]:
        items = self._vps_port.list_vps(actor=actor)
        return sorted(items, key=lambda item: item.vps.created_at, reverse=True)
