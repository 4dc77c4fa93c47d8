from __future__ import annotations

from portal.application.dto.me import MeOutput
from portal.application.ports.accounts_port import AccountsPort
from portal.domain.entities.actor import Actor
from portal.domain.services.navigation import member_home_path


class GetMeUseCase:
    def __init__(self, *, accounts: AccountsPort):
        self._accounts = accounts

    def execute(self, *, actor: Actor) -> MeOutput:
        profile = self._accounts.get_profile(user_id=actor.user_id)
        return MeOutput(
            user_id=actor.user_id,
            name=actor.name,
            email=actor.email,
            full_name=profile.full_name if profile is not None else None,
            phone=profile.phone if profile is not None else None,
            is_admin=actor.is_admin,
            home_path=member_home_path(is_admin=actor.is_admin),
        )
