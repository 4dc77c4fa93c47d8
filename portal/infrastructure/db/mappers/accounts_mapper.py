from __future__ import annotations

from typing import Any, Mapping

from portal.domain.entities.user import AuthSession, Profile, User


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        is_active=bool(row["is_active"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_profile(row: Mapping[str, Any]) -> Profile:
    return Profile(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        email=row["email"],
        full_name=row.get("full_name"),
        phone=row.get("phone"),
        is_admin=bool(row["is_admin"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_auth_session(row: Mapping[str, Any]) -> AuthSession:
    return AuthSession(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        refresh_token_hash=row["refresh_token_hash"],
        expires_at=row["expires_at"],
        revoked_at=row.get("revoked_at"),
        user_agent=row.get("user_agent"),
        ip=row.get("ip"),
        created_at=row["created_at"],
    )
