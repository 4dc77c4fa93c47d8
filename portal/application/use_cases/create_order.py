from __future__ import annotations

import logging
from uuid import uuid4

from portal.application.dto.orders import CreateOrderInput, CreateOrderOutput, build_payment_instructions
from portal.application.ports.catalog_port import CatalogPort
from portal.application.ports.orders_port import OrdersPort
from portal.application.ports.settings_port import SettingsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.settings import PAYMENT_SETTING_KEYS, PaymentSettings
from portal.domain.exceptions import PlanNotFoundError, PlanUnavailableError

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    def __init__(
        self,
        *,
        catalog_port: CatalogPort,
        orders_port: OrdersPort,
        settings_port: SettingsPort,
    ):
        self._catalog_port = catalog_port
        self._orders_port = orders_port
        self._settings_port = settings_port

    def execute(self, *, actor: Actor, command: CreateOrderInput) -> CreateOrderOutput:
        plan = self._catalog_port.get_plan_by_id(plan_id=command.plan_id)
        if plan is None:
            raise PlanNotFoundError("Plan not found.")
        if not plan.is_active:
            raise PlanUnavailableError("Plan is not available.")

        settings = PaymentSettings.from_mapping(self._settings_port.get_values(keys=PAYMENT_SETTING_KEYS))
        # O valor fica congelado no pedido; mudancas futuras no plano nao o alteram.
        order = self._orders_port.create_order(
            order_id=str(uuid4()),
            user_id=actor.user_id,
            plan_id=plan.id,
            amount=plan.price,
            payment_method="pix",
            pix_code=settings.pix_key or None,
            now=utcnow(),
        )
        logger.info(
            "create_order: created order_id=%s user_id=%s plan_id=%s amount=%s",
            order.id,
            order.user_id,
            order.plan_id,
            order.amount,
        )
        return CreateOrderOutput(
            order=order,
            plan=plan,
            payment=build_payment_instructions(settings=settings, amount=order.amount),
        )
