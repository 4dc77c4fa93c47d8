from __future__ import annotations

from portal.domain.entities.ticket import DEFAULT_TICKET_PRIORITY, TICKET_PRIORITIES
from portal.domain.exceptions import TicketInputError, TicketTransitionError


def normalize_priority(priority: str | None) -> str:
    if priority is None or not priority.strip():
        return DEFAULT_TICKET_PRIORITY
    value = priority.strip().lower()
    if value not in TICKET_PRIORITIES:
        raise TicketInputError(f"Invalid priority '{priority}'.")
    return value


def validate_ticket_text(*, title: str, message: str) -> tuple[str, str]:
    title_clean = title.strip()
    message_clean = message.strip()
    if not title_clean:
        raise TicketInputError("title is required.")
    if not message_clean:
        raise TicketInputError("message is required.")
    return title_clean, message_clean


def validate_admin_response(response: str) -> str:
    value = response.strip()
    if not value:
        raise TicketInputError("response is required.")
    return value


def ensure_ticket_open(*, ticket_id: str, status: str) -> None:
    if status != "open":
        raise TicketTransitionError(f"Ticket {ticket_id} is already {status}.")
