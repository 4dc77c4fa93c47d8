from __future__ import annotations

from typing import Protocol

from portal.domain.entities.ticket import TicketNotification


class NotificationPort(Protocol):
    def send_ticket_notification(self, notification: TicketNotification) -> None:
        ...
