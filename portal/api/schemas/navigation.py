from __future__ import annotations

from pydantic import BaseModel


class NavigationResponse(BaseModel):
    redirect_to: str
    requires_auth: bool


class RouteGuardResponse(BaseModel):
    allowed: bool
    redirect_to: str | None
