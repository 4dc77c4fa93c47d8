from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AdminCountersResponse(BaseModel):
    users: int
    vps: int
    orders_pending: int
    orders_paid: int
    orders_cancelled: int
    tickets_open: int


class AdminUserResponse(BaseModel):
    id: str
    user_id: str
    email: str
    full_name: str | None
    phone: str | None
    is_admin: bool
    created_at: datetime


class AdminOverviewResponse(BaseModel):
    counters: AdminCountersResponse
    users: list[AdminUserResponse]
