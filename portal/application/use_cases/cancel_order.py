from __future__ import annotations

import logging

from portal.application.dto.orders import CancelOrderOutput, OrderTransitionInput
from portal.application.ports.orders_port import OrdersPort
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import OrderNotFoundError, OrderTransitionError
from portal.domain.services.access import ensure_admin
from portal.domain.services.order_lifecycle import ensure_order_transition

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class CancelOrderUseCase:
    def __init__(self, *, orders_port: OrdersPort):
        self._orders_port = orders_port

    def execute(self, *, actor: Actor, command: OrderTransitionInput) -> CancelOrderOutput:
        ensure_admin(actor)

        item = self._orders_port.get_order(order_id=command.order_id, actor=actor)
        if item is None:
            raise OrderNotFoundError("Order not found.")
        ensure_order_transition(order_id=item.order.id, current=item.order.status, target="cancelled")

        order = self._orders_port.transition_order_status(
            order_id=item.order.id,
            from_status="pending",
            to_status="cancelled",
            now=utcnow(),
        )
        if order is None:
            raise OrderTransitionError(f"Order {item.order.id} is no longer pending.")

        logger.info("cancel_order: cancelled order_id=%s by=%s", order.id, actor.user_id)
        return CancelOrderOutput(order=order)
