from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from portal.domain.entities.ticket import Ticket, TicketListItem


def map_row_to_ticket(row: Mapping[str, Any]) -> Ticket:
    return Ticket(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        title=row["title"],
        message=row["message"],
        priority=row["priority"],
        status=row["status"],
        admin_response=row.get("admin_response"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_ticket_list_item(row: Mapping[str, Any]) -> TicketListItem:
    return TicketListItem(
        ticket=map_row_to_ticket(row),
        owner_name=row.get("owner_name"),
        owner_email=row.get("owner_email"),
    )
