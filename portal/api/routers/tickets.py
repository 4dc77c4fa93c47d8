from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from portal.api.deps import get_create_ticket_use_case, get_current_actor, get_list_tickets_use_case
from portal.api.schemas.tickets import (
    CreateTicketRequest,
    CreateTicketResponse,
    TicketListItemResponse,
    ticket_list_item_response,
    ticket_response,
)
from portal.application.dto.tickets import CreateTicketInput
from portal.application.use_cases.create_ticket import CreateTicketUseCase
from portal.application.use_cases.list_tickets import ListTicketsUseCase
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import TicketInputError


router = APIRouter()


@router.post("/v1/tickets", response_model=CreateTicketResponse, status_code=201)
def create_ticket(
    req: CreateTicketRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: CreateTicketUseCase = Depends(get_create_ticket_use_case),
):
    try:
        output = use_case.execute(
            actor=actor,
            command=CreateTicketInput(title=req.title, message=req.message, priority=req.priority),
        )
    except TicketInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CreateTicketResponse(
        ticket=ticket_response(output.ticket),
        notification_sent=output.notification_sent,
    )


@router.get("/v1/tickets", response_model=list[TicketListItemResponse])
def list_tickets(
    actor: Actor = Depends(get_current_actor),
    use_case: ListTicketsUseCase = Depends(get_list_tickets_use_case),
):
    return [ticket_list_item_response(item) for item in use_case.execute(actor=actor)]
