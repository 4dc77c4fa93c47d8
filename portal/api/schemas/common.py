from __future__ import annotations

from pydantic import BaseModel

from portal.domain.services.status_labels import present_status


class StatusBadgeResponse(BaseModel):
    label: str
    emphasis: str


def status_badge(status: str | None) -> StatusBadgeResponse:
    presentation = present_status(status)
    return StatusBadgeResponse(label=presentation.label, emphasis=presentation.emphasis)
