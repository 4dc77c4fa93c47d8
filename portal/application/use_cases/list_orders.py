from __future__ import annotations

from portal.application.ports.orders_port import OrdersPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.order import OrderListItem


class ListOrdersUseCase:
    def __init__(self, *, orders_port: OrdersPort):
        self._orders_port = orders_port

    def execute(self, *, actor: Actor) -> list[OrderListItem]:
        items = self._orders_port.list_orders(actor=actor)
        return sorted(items, key=lambda item: item.order.created_at, reverse=True)
