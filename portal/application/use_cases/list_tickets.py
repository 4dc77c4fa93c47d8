from __future__ import annotations

from portal.application.ports.tickets_port import TicketsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.ticket import TicketListItem


class ListTicketsUseCase:
    def __init__(self, *, tickets_port: TicketsPort):
        self._tickets_port = tickets_port

    def execute(self, *, actor: Actor) -> list[TicketListItem]:
        items = self._tickets_port.list_tickets(actor=actor)
        return sorted(items, key=lambda item: item.ticket.created_at, reverse=True)
