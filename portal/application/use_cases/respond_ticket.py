from __future__ import annotations

import logging

from portal.application.dto.tickets import RespondTicketInput
from portal.application.ports.tickets_port import TicketsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.ticket import Ticket
from portal.domain.exceptions import TicketNotFoundError, TicketTransitionError
from portal.domain.services.access import ensure_admin
from portal.domain.services.ticket_lifecycle import ensure_ticket_open, validate_admin_response

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class RespondTicketUseCase:
    def __init__(self, *, tickets_port: TicketsPort):
        self._tickets_port = tickets_port

    def execute(self, *, actor: Actor, command: RespondTicketInput) -> Ticket:
        ensure_admin(actor)
        response = validate_admin_response(command.response)

        ticket = self._tickets_port.get_ticket(ticket_id=command.ticket_id, actor=actor)
        if ticket is None:
            raise TicketNotFoundError("Ticket not found.")
        ensure_ticket_open(ticket_id=ticket.id, status=ticket.status)

        closed = self._tickets_port.close_ticket_with_response(
            ticket_id=ticket.id,
            admin_response=response,
            now=utcnow(),
        )
        if closed is None:
            raise TicketTransitionError(f"Ticket {ticket.id} is already closed.")

        logger.info("respond_ticket: closed ticket_id=%s by=%s", closed.id, actor.user_id)
        return closed
