from __future__ import annotations

import logging

from portal.application.dto.auth import LogoutInput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.credentials_port import TokenPort

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class LogoutSessionUseCase:
    """Revoga a sessao do refresh token. Token desconhecido ou ja revogado nao e erro."""

    def __init__(self, *, accounts: AccountsPort, token_port: TokenPort):
        self._accounts = accounts
        self._token_port = token_port

    def execute(self, command: LogoutInput) -> bool:
        token = command.refresh_token.strip()
        if not token:
            return False
        session = self._accounts.find_session(
            refresh_token_hash=self._token_port.digest_refresh_token(refresh_token=token)
        )
        if session is None:
            return False
        revoked = self._accounts.revoke_session(session_id=session.id, revoked_at=utcnow())
        if revoked:
            logger.info("logout_session: revoked session_id=%s user_id=%s", session.id, session.user_id)
        return revoked
