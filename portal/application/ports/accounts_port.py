from __future__ import annotations

from datetime import datetime
from typing import Callable, Protocol, TypeVar

from portal.domain.entities.user import AuthSession, Profile, User


T = TypeVar("T")


class AccountsPort(Protocol):
    """Contas do portal: usuario com senha local, perfil vinculado e sessoes de refresh."""

    def execute_in_transaction(self, fn: Callable[[AccountsPort], T]) -> T:
        ...

    def get_user(self, *, user_id: str) -> User | None:
        ...

    def find_user_by_email(self, *, email: str) -> User | None:
        ...

    def get_password_hash(self, *, user_id: str) -> str | None:
        ...

    def add_user(self, *, user: User, password_hash: str) -> None:
        ...

    def set_password_hash(self, *, user_id: str, password_hash: str, updated_at: datetime) -> None:
        ...

    def add_profile(self, *, profile: Profile) -> None:
        ...

    def get_profile(self, *, user_id: str) -> Profile | None:
        ...

    def list_profiles(self) -> list[Profile]:
        ...

    def add_session(self, *, session: AuthSession) -> None:
        ...

    def find_session(self, *, refresh_token_hash: str) -> AuthSession | None:
        ...

    def revoke_session(self, *, session_id: str, revoked_at: datetime) -> bool:
        """Retorna False quando a sessao ja estava revogada."""
        ...
