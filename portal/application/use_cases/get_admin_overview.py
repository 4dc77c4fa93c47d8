from __future__ import annotations

from portal.application.dto.admin import AdminOverviewOutput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.orders_port import OrdersPort
from portal.application.ports.tickets_port import TicketsPort
from portal.application.ports.vps_port import VpsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.admin import AdminCounters
from portal.domain.services.access import ensure_admin


class GetAdminOverviewUseCase:
    def __init__(
        self,
        *,
        accounts: AccountsPort,
        orders_port: OrdersPort,
        vps_port: VpsPort,
        tickets_port: TicketsPort,
    ):
        self._accounts = accounts
        self._orders_port = orders_port
        self._vps_port = vps_port
        self._tickets_port = tickets_port

    def execute(self, *, actor: Actor) -> AdminOverviewOutput:
        ensure_admin(actor)
        profiles = sorted(
            self._accounts.list_profiles(),
            key=lambda profile: profile.created_at,
            reverse=True,
        )
        by_status = self._orders_port.count_orders_by_status()
        return AdminOverviewOutput(
            counters=AdminCounters(
                users=len(profiles),
                vps=self._vps_port.count_vps(),
                orders_pending=by_status.get("pending", 0),
                orders_paid=by_status.get("paid", 0),
                orders_cancelled=by_status.get("cancelled", 0),
                tickets_open=self._tickets_port.count_open_tickets(),
            ),
            users=profiles,
        )
