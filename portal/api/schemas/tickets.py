from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from portal.api.schemas.common import StatusBadgeResponse, status_badge
from portal.domain.entities.ticket import Ticket, TicketListItem
from portal.domain.services.status_labels import priority_label


class CreateTicketRequest(BaseModel):
    title: str = Field(..., max_length=200)
    message: str = Field(..., max_length=5000)
    priority: str | None = Field(default=None, max_length=16)


class RespondTicketRequest(BaseModel):
    response: str = Field(..., max_length=5000)


class TicketResponse(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    priority: str
    priority_label: str
    status: str
    status_badge: StatusBadgeResponse
    admin_response: str | None
    created_at: datetime
    updated_at: datetime


class TicketListItemResponse(TicketResponse):
    owner_name: str | None
    owner_email: str | None


class CreateTicketResponse(BaseModel):
    ticket: TicketResponse
    notification_sent: bool


def _ticket_fields(ticket: Ticket) -> dict:
    return {
        "id": ticket.id,
        "user_id": ticket.user_id,
        "title": ticket.title,
        "message": ticket.message,
        "priority": ticket.priority,
        "priority_label": priority_label(ticket.priority),
        "status": ticket.status,
        "status_badge": status_badge(ticket.status),
        "admin_response": ticket.admin_response,
        "created_at": ticket.created_at,
        "updated_at": ticket.updated_at,
    }


def ticket_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(**_ticket_fields(ticket))


def ticket_list_item_response(item: TicketListItem) -> TicketListItemResponse:
    return TicketListItemResponse(
        **_ticket_fields(item.ticket),
        owner_name=item.owner_name,
        owner_email=item.owner_email,
    )
