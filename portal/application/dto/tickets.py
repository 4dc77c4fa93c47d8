from __future__ import annotations

from dataclasses import dataclass

from portal.domain.entities.ticket import Ticket


@dataclass(frozen=True)
class CreateTicketInput:
    title: str
    message: str
    priority: str | None = None


@dataclass(frozen=True)
class CreateTicketOutput:
    ticket: Ticket
    notification_sent: bool


@dataclass(frozen=True)
class RespondTicketInput:
    ticket_id: str
    response: str
