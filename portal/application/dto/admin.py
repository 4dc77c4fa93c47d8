from __future__ import annotations

from dataclasses import dataclass

from portal.domain.entities.admin import AdminCounters
from portal.domain.entities.user import Profile


@dataclass(frozen=True)
class AdminOverviewOutput:
    counters: AdminCounters
    users: list[Profile]
