from __future__ import annotations

from pydantic import BaseModel


class MeUserResponse(BaseModel):
    id: str
    name: str
    email: str


class MeResponse(BaseModel):
    user: MeUserResponse
    full_name: str | None
    phone: str | None
    is_admin: bool
    home_path: str
