from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from portal.domain.entities.actor import Actor
from portal.domain.entities.order import Order, OrderListItem
from portal.domain.entities.vps import Vps, VpsProvisioning


class OrdersPort(Protocol):
    def create_order(
        self,
        *,
        order_id: str,
        user_id: str,
        plan_id: str,
        amount: Decimal,
        payment_method: str | None,
        pix_code: str | None,
        now: datetime,
    ) -> Order:
        ...

    def get_order(self, *, order_id: str, actor: Actor) -> OrderListItem | None:
        ...

    def list_orders(self, *, actor: Actor) -> list[OrderListItem]:
        ...

    def approve_and_provision(
        self,
        *,
        order_id: str,
        provisioning: VpsProvisioning,
        now: datetime,
    ) -> tuple[Order, Vps] | None:
        """Troca pending -> paid e cria a VPS na mesma transacao.

        Retorna None quando o pedido nao estava mais `pending`.
        """
        ...

    def transition_order_status(
        self,
        *,
        order_id: str,
        from_status: str,
        to_status: str,
        now: datetime,
    ) -> Order | None:
        ...

    def count_orders_by_status(self) -> dict[str, int]:
        ...
