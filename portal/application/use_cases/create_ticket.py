from __future__ import annotations

import logging
from uuid import uuid4

from portal.application.dto.tickets import CreateTicketInput, CreateTicketOutput
from portal.application.ports.notification_port import NotificationPort
from portal.application.ports.tickets_port import TicketsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.ticket import TicketNotification
from portal.domain.exceptions import NotificationError
from portal.domain.services.ticket_lifecycle import normalize_priority, validate_ticket_text

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class CreateTicketUseCase:
    def __init__(self, *, tickets_port: TicketsPort, notification_port: NotificationPort):
        self._tickets_port = tickets_port
        self._notification_port = notification_port

    def execute(self, *, actor: Actor, command: CreateTicketInput) -> CreateTicketOutput:
        title, message = validate_ticket_text(title=command.title, message=command.message)
        priority = normalize_priority(command.priority)

        ticket = self._tickets_port.create_ticket(
            ticket_id=str(uuid4()),
            user_id=actor.user_id,
            title=title,
            message=message,
            priority=priority,
            now=utcnow(),
        )
        logger.info("create_ticket: created ticket_id=%s priority=%s", ticket.id, ticket.priority)

        notification_sent = self._notify(
            TicketNotification(
                title=ticket.title,
                message=ticket.message,
                priority=ticket.priority,
                user_email=actor.email,
            ),
            ticket_id=ticket.id,
        )
        return CreateTicketOutput(ticket=ticket, notification_sent=notification_sent)

    def _notify(self, notification: TicketNotification, *, ticket_id: str) -> bool:
        # O ticket ja esta gravado; falha no envio so e registrada.
        try:
            self._notification_port.send_ticket_notification(notification)
        except NotificationError as exc:
            logger.warning("create_ticket: notification_failed ticket_id=%s error=%s", ticket_id, exc)
            return False
        logger.info("create_ticket: notification_sent ticket_id=%s", ticket_id)
        return True
