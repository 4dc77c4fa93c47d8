from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from portal.application.dto.auth import AuthTokensOutput, AuthUserOutput


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8, max_length=256)
    phone: str | None = Field(default=None, max_length=40)


class LoginRequest(BaseModel):
    """`planId`/`returnTo` chegam quando o login foi disparado por um checkout."""

    model_config = {"populate_by_name": True}

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=256)
    plan_id: str | None = Field(default=None, alias="planId", max_length=64)
    return_to: str | None = Field(default=None, alias="returnTo", max_length=512)


class AccountResponse(BaseModel):
    id: str
    name: str
    email: str
    is_active: bool
    is_admin: bool


class RegisterResponse(BaseModel):
    user: AccountResponse


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    access_expires_at: datetime
    refresh_expires_at: datetime
    user: AccountResponse
    redirect_to: str | None = None


class LogoutResponse(BaseModel):
    ok: bool
    revoked: bool


def account_response(user: AuthUserOutput) -> AccountResponse:
    return AccountResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        is_active=user.is_active,
        is_admin=user.is_admin,
    )


def session_response(output: AuthTokensOutput) -> SessionResponse:
    return SessionResponse(
        access_token=output.access_token,
        access_expires_at=output.access_expires_at,
        refresh_expires_at=output.refresh_expires_at,
        user=account_response(output.user),
        redirect_to=output.redirect_to,
    )
