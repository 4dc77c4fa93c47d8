from __future__ import annotations

from portal.application.dto.catalog import GetPlanInput
from portal.application.ports.catalog_port import CatalogPort
from portal.domain.entities.plan import Plan
from portal.domain.exceptions import PlanNotFoundError


class GetPlanUseCase:
    def __init__(self, *, catalog_port: CatalogPort):
        self._catalog_port = catalog_port

    def execute(self, command: GetPlanInput) -> Plan:
        plan = self._catalog_port.get_plan_by_id(plan_id=command.plan_id)
        if plan is None:
            raise PlanNotFoundError("Plan not found.")
        return plan
