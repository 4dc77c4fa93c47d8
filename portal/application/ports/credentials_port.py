from __future__ import annotations

from datetime import datetime
from typing import Protocol

from portal.application.dto.auth import AccessTokenPayload, IssuedToken


class PasswordHasherPort(Protocol):
    def hash(self, plain_password: str) -> str:
        ...

    def verify_and_update(self, plain_password: str, password_hash: str) -> tuple[bool, str | None]:
        """Retorna (confere, novo_hash); novo_hash vem preenchido quando o esquema esta obsoleto."""
        ...


class TokenPort(Protocol):
    def issue_access_token(self, *, user_id: str, now: datetime) -> IssuedToken:
        ...

    def read_access_token(self, *, token: str) -> AccessTokenPayload:
        """Levanta ValueError para token invalido, expirado ou de outro tipo."""
        ...

    def issue_refresh_token(self, *, now: datetime) -> IssuedToken:
        ...

    def digest_refresh_token(self, *, refresh_token: str) -> str:
        ...
