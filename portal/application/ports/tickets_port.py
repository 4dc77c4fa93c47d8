from __future__ import annotations

from datetime import datetime
from typing import Protocol

from portal.domain.entities.actor import Actor
from portal.domain.entities.ticket import Ticket, TicketListItem


class TicketsPort(Protocol):
    def create_ticket(
        self,
        *,
        ticket_id: str,
        user_id: str,
        title: str,
        message: str,
        priority: str,
        now: datetime,
    ) -> Ticket:
        ...

    def get_ticket(self, *, ticket_id: str, actor: Actor) -> Ticket | None:
        ...

    def list_tickets(self, *, actor: Actor) -> list[TicketListItem]:
        ...

    def close_ticket_with_response(
        self,
        *,
        ticket_id: str,
        admin_response: str,
        now: datetime,
    ) -> Ticket | None:
        ...

    def count_open_tickets(self) -> int:
        ...
