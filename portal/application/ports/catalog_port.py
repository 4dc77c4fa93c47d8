from __future__ import annotations

from typing import Protocol

from portal.domain.entities.plan import Plan


class CatalogPort(Protocol):
    def list_active_plans(self) -> list[Plan]:
        ...

    def get_plan_by_id(self, *, plan_id: str) -> Plan | None:
        ...
