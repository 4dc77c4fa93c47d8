from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from portal.application.dto.auth import AuthTokensOutput, AuthUserOutput
from portal.application.ports.accounts_port import AccountsPort
from portal.application.ports.credentials_port import TokenPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.user import AuthSession, Profile, User
from portal.domain.exceptions import RefreshSessionInvalidError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_admin_profile(profile: Profile | None) -> bool:
    return bool(profile is not None and profile.is_admin)


def build_actor(user: User, profile: Profile | None) -> Actor:
    return Actor(
        user_id=user.id,
        email=user.email,
        name=(profile.full_name if profile is not None and profile.full_name else user.name),
        is_admin=is_admin_profile(profile),
    )


def ensure_session_usable(session: AuthSession | None, *, now: datetime) -> AuthSession:
    """Valida a sessao encontrada pelo hash do refresh token."""
    if session is None:
        raise RefreshSessionInvalidError("Invalid refresh session.")
    if session.revoked_at is not None:
        raise RefreshSessionInvalidError("Refresh session already revoked.")
    if not session.is_usable(now):
        raise RefreshSessionInvalidError("Refresh session expired.")
    return session


def to_user_output(user: User, profile: Profile | None) -> AuthUserOutput:
    return AuthUserOutput(
        id=user.id,
        name=user.name,
        email=user.email,
        is_active=user.is_active,
        is_admin=is_admin_profile(profile),
    )


def open_session(
    *,
    user: User,
    profile: Profile | None,
    accounts: AccountsPort,
    token_port: TokenPort,
    user_agent: str | None,
    ip: str | None,
    redirect_to: str | None = None,
) -> AuthTokensOutput:
    """Grava uma sessao nova e devolve o par access/refresh que a representa."""
    now = utcnow()
    access = token_port.issue_access_token(user_id=user.id, now=now)
    refresh = token_port.issue_refresh_token(now=now)
    accounts.add_session(
        session=AuthSession(
            id=str(uuid4()),
            user_id=user.id,
            refresh_token_hash=token_port.digest_refresh_token(refresh_token=refresh.value),
            expires_at=refresh.expires_at,
            revoked_at=None,
            user_agent=user_agent,
            ip=ip,
            created_at=now,
        )
    )
    return AuthTokensOutput(
        user=to_user_output(user, profile),
        access_token=access.value,
        refresh_token=refresh.value,
        access_expires_at=access.expires_at,
        refresh_expires_at=refresh.expires_at,
        redirect_to=redirect_to,
    )
