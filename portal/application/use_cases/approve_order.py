from __future__ import annotations

import logging
import random

from portal.application.dto.orders import ApproveOrderOutput, OrderTransitionInput
from portal.application.ports.orders_port import OrdersPort
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import OrderNotFoundError, OrderTransitionError
from portal.domain.services.access import ensure_admin
from portal.domain.services.order_lifecycle import ensure_order_transition
from portal.domain.services.provisioning import build_vps_provisioning

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class ApproveOrderUseCase:
    """Aprova um pedido pendente e provisiona o registro de VPS correspondente.

    A troca de status e a criacao da VPS acontecem numa unica transacao do
    repositorio, condicionada a `status = 'pending'`. Duas aprovacoes
    concorrentes resultam em uma VPS; a segunda recebe `OrderTransitionError`.
    """

    def __init__(
        self,
        *,
        orders_port: OrdersPort,
        control_panel_url: str,
        remote_access_url: str,
        rng: random.Random | None = None,
    ):
        self._orders_port = orders_port
        self._control_panel_url = control_panel_url
        self._remote_access_url = remote_access_url
        self._rng = rng

    def execute(self, *, actor: Actor, command: OrderTransitionInput) -> ApproveOrderOutput:
        ensure_admin(actor)

        item = self._orders_port.get_order(order_id=command.order_id, actor=actor)
        if item is None:
            raise OrderNotFoundError("Order not found.")
        ensure_order_transition(order_id=item.order.id, current=item.order.status, target="paid")

        provisioning = build_vps_provisioning(
            plan_name=item.plan_name,
            owner_name=item.owner_name,
            owner_email=item.owner_email,
            control_panel_url=self._control_panel_url,
            remote_access_url=self._remote_access_url,
            rng=self._rng,
        )
        result = self._orders_port.approve_and_provision(
            order_id=item.order.id,
            provisioning=provisioning,
            now=utcnow(),
        )
        if result is None:
            logger.warning("approve_order: lost race order_id=%s by=%s", item.order.id, actor.user_id)
            raise OrderTransitionError(f"Order {item.order.id} is no longer pending.")

        order, vps = result
        logger.info(
            "approve_order: approved order_id=%s vps_id=%s ip=%s by=%s",
            order.id,
            vps.id,
            vps.ip_address,
            actor.user_id,
        )
        return ApproveOrderOutput(order=order, vps=vps)
