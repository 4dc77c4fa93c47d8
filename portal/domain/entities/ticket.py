from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


TicketPriority = Literal["low", "medium", "high"]
TicketStatus = Literal["open", "closed"]

TICKET_PRIORITIES: frozenset[str] = frozenset({"low", "medium", "high"})
DEFAULT_TICKET_PRIORITY: TicketPriority = "medium"


@dataclass(frozen=True)
class Ticket:
    id: str
    user_id: str
    title: str
    message: str
    priority: TicketPriority
    status: TicketStatus
    admin_response: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TicketListItem:
    ticket: Ticket
    owner_name: str | None
    owner_email: str | None


@dataclass(frozen=True)
class TicketNotification:
    title: str
    message: str
    priority: str
    user_email: str
