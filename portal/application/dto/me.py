from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MeOutput:
    user_id: str
    name: str
    email: str
    full_name: str | None
    phone: str | None
    is_admin: bool
    home_path: str
