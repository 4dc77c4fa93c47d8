from __future__ import annotations

from portal.application.ports.catalog_port import CatalogPort
from portal.domain.entities.plan import Plan


class ListPlansUseCase:
    def __init__(self, *, catalog_port: CatalogPort):
        self._catalog_port = catalog_port

    def execute(self) -> list[Plan]:
        return self._catalog_port.list_active_plans()
