from __future__ import annotations

import logging

from portal.application.dto.auth import AuthTokensOutput, RefreshSessionInput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.credentials_port import TokenPort
from portal.domain.exceptions import RefreshSessionInvalidError, UserInactiveError
from portal.domain.services.navigation import member_home_path

from .auth_common import ensure_session_usable, is_admin_profile, open_session, utcnow


logger = logging.getLogger(__name__)


class RefreshSessionUseCase:
    """Troca um refresh token valido por um novo par de tokens.

    A sessao antiga e revogada na mesma transacao que grava a nova, entao um
    token ja trocado nao pode ser reapresentado.
    """

    def __init__(self, *, accounts: AccountsPort, token_port: TokenPort):
        self._accounts = accounts
        self._token_port = token_port

    def execute(self, command: RefreshSessionInput) -> AuthTokensOutput:
        token = command.refresh_token.strip()
        if not token:
            raise RefreshSessionInvalidError("Missing refresh token.")

        refresh_hash = self._token_port.digest_refresh_token(refresh_token=token)
        output = self._accounts.execute_in_transaction(
            lambda accounts: self._rotate(accounts, refresh_hash=refresh_hash, command=command)
        )
        logger.info("refresh_session: rotated user_id=%s", output.user.id)
        return output

    def _rotate(
        self,
        accounts: AccountsPort,
        *,
        refresh_hash: str,
        command: RefreshSessionInput,
    ) -> AuthTokensOutput:
        now = utcnow()
        session = ensure_session_usable(accounts.find_session(refresh_token_hash=refresh_hash), now=now)
        user = accounts.get_user(user_id=session.user_id)
        if user is None:
            raise RefreshSessionInvalidError("User not found for refresh session.")
        if not user.is_active:
            raise UserInactiveError("User is inactive.")
        if not accounts.revoke_session(session_id=session.id, revoked_at=now):
            raise RefreshSessionInvalidError("Refresh session already revoked.")

        profile = accounts.get_profile(user_id=user.id)
        return open_session(
            user=user,
            profile=profile,
            accounts=accounts,
            token_port=self._token_port,
            user_agent=command.user_agent,
            ip=command.ip,
            redirect_to=member_home_path(is_admin=is_admin_profile(profile)),
        )
