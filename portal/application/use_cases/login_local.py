from __future__ import annotations

import logging

from portal.application.dto.auth import AuthTokensOutput, LoginLocalInput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.credentials_port import PasswordHasherPort, TokenPort
from portal.domain.exceptions import InvalidCredentialsError, UserInactiveError
from portal.domain.services.navigation import resolve_post_login_destination

from .auth_common import is_admin_profile, open_session, utcnow


logger = logging.getLogger(__name__)


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        accounts: AccountsPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginLocalInput) -> AuthTokensOutput:
        user = self._accounts.find_user_by_email(email=command.email.strip())
        password_hash = self._accounts.get_password_hash(user_id=user.id) if user is not None else None
        if user is None or not password_hash:
            raise InvalidCredentialsError("Invalid credentials.")

        verified, replacement_hash = self._password_hasher.verify_and_update(command.password, password_hash)
        if not verified:
            logger.info("login_local: rejected user_id=%s", user.id)
            raise InvalidCredentialsError("Invalid credentials.")
        if not user.is_active:
            raise UserInactiveError("User is inactive.")

        if replacement_hash:
            self._accounts.set_password_hash(user_id=user.id, password_hash=replacement_hash, updated_at=utcnow())

        profile = self._accounts.get_profile(user_id=user.id)
        return open_session(
            user=user,
            profile=profile,
            accounts=self._accounts,
            token_port=self._token_port,
            user_agent=command.user_agent,
            ip=command.ip,
            redirect_to=resolve_post_login_destination(
                plan_id=command.plan_id,
                return_to=command.return_to,
                is_admin=is_admin_profile(profile),
            ),
        )
