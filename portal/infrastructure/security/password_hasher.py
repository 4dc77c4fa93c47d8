from __future__ import annotations

import logging

from passlib.context import CryptContext

from portal.application.ports.credentials_port import PasswordHasherPort


logger = logging.getLogger(__name__)

DEFAULT_SCHEMES = ("argon2", "bcrypt")


class PasslibPasswordHasher(PasswordHasherPort):
    """Argon2 para hashes novos; bcrypt continua aceito e e migrado no login."""

    def __init__(self, *, schemes: tuple[str, ...] = DEFAULT_SCHEMES):
        self._ctx = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)

    def verify_and_update(self, plain_password: str, password_hash: str) -> tuple[bool, str | None]:
        try:
            verified, replacement_hash = self._ctx.verify_and_update(plain_password, password_hash)
        except (ValueError, TypeError) as exc:
            # Hash corrompido ou de esquema desconhecido conta como senha errada.
            logger.warning("password_hasher: unreadable_hash error=%s", type(exc).__name__)
            return False, None
        if verified and replacement_hash:
            logger.info("password_hasher: rehash_scheduled scheme=%s", self._ctx.identify(password_hash))
        return bool(verified), replacement_hash
