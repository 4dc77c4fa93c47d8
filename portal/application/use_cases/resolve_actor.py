from __future__ import annotations

from portal.application.dto.auth import AccessTokenPayload
from portal.application.ports.accounts_port import AccountsPort
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import InvalidCredentialsError, UserInactiveError

from .auth_common import build_actor


class ResolveActorUseCase:
    """Monta o `Actor` a partir do token ja decodificado, lendo o perfil para o flag de admin."""

    def __init__(self, *, accounts: AccountsPort):
        self._accounts = accounts

    def execute(self, payload: AccessTokenPayload) -> Actor:
        user = self._accounts.get_user(user_id=payload.user_id)
        if user is None:
            raise InvalidCredentialsError("User not found.")
        if not user.is_active:
            raise UserInactiveError("User is inactive.")
        profile = self._accounts.get_profile(user_id=user.id)
        return build_actor(user, profile)
