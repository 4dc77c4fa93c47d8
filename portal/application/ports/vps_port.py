from __future__ import annotations

from typing import Protocol

from portal.domain.entities.actor import Actor
from portal.domain.entities.vps import VpsListItem


class VpsPort(Protocol):
    def list_vps(self, *, actor: Actor) -> list[VpsListItem]:
        ...

    def count_vps(self) -> int:
        ...
