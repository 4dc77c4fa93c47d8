from __future__ import annotations

from portal.application.dto.orders import CheckoutOutput, GetCheckoutInput, build_payment_instructions
from portal.application.ports.catalog_port import CatalogPort
from portal.application.ports.settings_port import SettingsPort
from portal.domain.entities.settings import PAYMENT_SETTING_KEYS, PaymentSettings
from portal.domain.exceptions import PlanNotFoundError, PlanUnavailableError


class GetCheckoutUseCase:
    def __init__(self, *, catalog_port: CatalogPort, settings_port: SettingsPort):
        self._catalog_port = catalog_port
        self._settings_port = settings_port

    def execute(self, command: GetCheckoutInput) -> CheckoutOutput:
        plan = self._catalog_port.get_plan_by_id(plan_id=command.plan_id)
        if plan is None:
            raise PlanNotFoundError("Plan not found.")
        if not plan.is_active:
            raise PlanUnavailableError("Plan is not available.")
        settings = PaymentSettings.from_mapping(self._settings_port.get_values(keys=PAYMENT_SETTING_KEYS))
        return CheckoutOutput(
            plan=plan,
            payment=build_payment_instructions(settings=settings, amount=plan.price),
        )
