from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Profile:
    """Linha de perfil vinculada ao usuario; e dela que sai o flag de administrador."""

    id: str
    user_id: str
    email: str
    full_name: str | None
    phone: str | None
    is_admin: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AuthSession:
    id: str
    user_id: str
    refresh_token_hash: str
    expires_at: datetime
    revoked_at: datetime | None
    user_agent: str | None
    ip: str | None
    created_at: datetime

    def is_usable(self, now: datetime) -> bool:
        return self.revoked_at is None and self.expires_at > now
