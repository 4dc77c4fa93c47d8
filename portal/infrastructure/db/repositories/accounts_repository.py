from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Callable, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from portal.application.ports.accounts_port import AccountsPort
from portal.domain.entities.user import AuthSession, Profile, User
from portal.domain.exceptions import EmailAlreadyExistsError
from portal.infrastructure.db.mappers.accounts_mapper import (
    map_row_to_auth_session,
    map_row_to_profile,
    map_row_to_user,
)

from .base import SqlRepository


T = TypeVar("T")

_USER_SELECT = "SELECT id, name, email, is_active, created_at, updated_at FROM public.users"
_PROFILE_SELECT = (
    "SELECT id, user_id, email, full_name, phone, is_admin, created_at, updated_at FROM public.profiles"
)
_SESSION_SELECT = (
    "SELECT id, user_id, refresh_token_hash, expires_at, revoked_at, user_agent, ip, created_at"
    " FROM public.auth_sessions"
)


class SqlAccountsRepository(SqlRepository, AccountsPort):
    def execute_in_transaction(self, fn: Callable[[AccountsPort], T]) -> T:
        if self._connection is not None:
            return fn(self)
        with self._engine.begin() as conn:
            return fn(SqlAccountsRepository(self._engine, connection=conn))

    def get_user(self, *, user_id: str) -> User | None:
        with self._read() as conn:
            row = conn.execute(text(f"{_USER_SELECT} WHERE id = :id"), {"id": user_id}).mappings().first()
        return map_row_to_user(row) if row is not None else None

    def find_user_by_email(self, *, email: str) -> User | None:
        with self._read() as conn:
            row = conn.execute(
                text(f"{_USER_SELECT} WHERE lower(email) = lower(:email)"),
                {"email": email},
            ).mappings().first()
        return map_row_to_user(row) if row is not None else None

    def get_password_hash(self, *, user_id: str) -> str | None:
        with self._read() as conn:
            return conn.execute(
                text("SELECT password_hash FROM public.users WHERE id = :id"),
                {"id": user_id},
            ).scalar_one_or_none()

    def add_user(self, *, user: User, password_hash: str) -> None:
        sql = """
            INSERT INTO public.users (id, name, email, password_hash, is_active, created_at, updated_at)
            VALUES (:id, :name, :email, :password_hash, :is_active, :created_at, :updated_at)
        """
        try:
            with self._write() as conn:
                conn.execute(text(sql), {**asdict(user), "password_hash": password_hash})
        except IntegrityError as exc:
            # Cadastro concorrente com o mesmo email passou pela checagem previa.
            raise EmailAlreadyExistsError("Email already in use.") from exc

    def set_password_hash(self, *, user_id: str, password_hash: str, updated_at: datetime) -> None:
        sql = """
            UPDATE public.users
            SET password_hash = :password_hash, updated_at = :updated_at
            WHERE id = :id
        """
        with self._write() as conn:
            conn.execute(text(sql), {"id": user_id, "password_hash": password_hash, "updated_at": updated_at})

    def add_profile(self, *, profile: Profile) -> None:
        sql = """
            INSERT INTO public.profiles (id, user_id, email, full_name, phone, is_admin, created_at, updated_at)
            VALUES (:id, :user_id, :email, :full_name, :phone, :is_admin, :created_at, :updated_at)
        """
        with self._write() as conn:
            conn.execute(text(sql), asdict(profile))

    def get_profile(self, *, user_id: str) -> Profile | None:
        with self._read() as conn:
            row = conn.execute(
                text(f"{_PROFILE_SELECT} WHERE user_id = :user_id"),
                {"user_id": user_id},
            ).mappings().first()
        return map_row_to_profile(row) if row is not None else None

    def list_profiles(self) -> list[Profile]:
        with self._read() as conn:
            rows = conn.execute(text(f"{_PROFILE_SELECT} ORDER BY created_at DESC")).mappings().all()
        return [map_row_to_profile(row) for row in rows]

    def add_session(self, *, session: AuthSession) -> None:
        sql = """
            INSERT INTO public.auth_sessions (
                id, user_id, refresh_token_hash, expires_at, revoked_at, user_agent, ip, created_at
            ) VALUES (
                :id, :user_id, :refresh_token_hash, :expires_at, :revoked_at, :user_agent, :ip, :created_at
            )
        """
        with self._write() as conn:
            conn.execute(text(sql), asdict(session))

    def find_session(self, *, refresh_token_hash: str) -> AuthSession | None:
        with self._read() as conn:
            row = conn.execute(
                text(f"{_SESSION_SELECT} WHERE refresh_token_hash = :hash"),
                {"hash": refresh_token_hash},
            ).mappings().first()
        return map_row_to_auth_session(row) if row is not None else None

    def revoke_session(self, *, session_id: str, revoked_at: datetime) -> bool:
        # Condicional em revoked_at: duas rotacoes simultaneas do mesmo token nao passam juntas.
        sql = """
            UPDATE public.auth_sessions
            SET revoked_at = :revoked_at
            WHERE id = :id
              AND revoked_at IS NULL
        """
        with self._write() as conn:
            result = conn.execute(text(sql), {"id": session_id, "revoked_at": revoked_at})
        return result.rowcount == 1
