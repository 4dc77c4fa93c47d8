from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Cookie, Depends, Header, HTTPException, Request, Response

from portal.api.deps import (
    get_login_local_use_case,
    get_logout_session_use_case,
    get_refresh_session_use_case,
    get_register_user_use_case,
)
from portal.api.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
    account_response,
    session_response,
)
from portal.application.dto.auth import (
    AuthTokensOutput,
    LoginLocalInput,
    LogoutInput,
    RefreshSessionInput,
    RegisterUserInput,
)
from portal.application.use_cases.login_local import LoginLocalUseCase
from portal.application.use_cases.logout_session import LogoutSessionUseCase
from portal.application.use_cases.refresh_session import RefreshSessionUseCase
from portal.application.use_cases.register_user import RegisterUserUseCase
from portal.domain.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RefreshSessionInvalidError,
    UserInactiveError,
)
from portal.shared.config import get_settings


router = APIRouter(prefix="/v1/auth")

SESSION_COOKIE = "refresh_token"
SESSION_COOKIE_PATH = "/v1/auth"


def _client_ip(request: Request, forwarded_for: str | None) -> str | None:
    # Primeiro endereco do X-Forwarded-For e o cliente original atras do proxy.
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or None
    return request.client.host if request.client is not None else None


def _with_session_cookie(response: Response, output: AuthTokensOutput) -> SessionResponse:
    remaining = output.refresh_expires_at - datetime.now(timezone.utc)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=output.refresh_token,
        max_age=max(int(remaining.total_seconds()), 0),
        path=SESSION_COOKIE_PATH,
        httponly=True,
        samesite="lax",
        secure=get_settings().refresh_cookie_secure,
    )
    return session_response(output)


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    req: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    command = RegisterUserInput(name=req.name, email=req.email, password=req.password, phone=req.phone)
    try:
        output = use_case.execute(command)
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return RegisterResponse(user=account_response(output.user))


@router.post("/login", response_model=SessionResponse)
def login(
    req: LoginRequest,
    request: Request,
    response: Response,
    user_agent: str | None = Header(default=None),
    x_forwarded_for: str | None = Header(default=None),
    use_case: LoginLocalUseCase = Depends(get_login_local_use_case),
):
    command = LoginLocalInput(
        email=req.email,
        password=req.password,
        user_agent=user_agent,
        ip=_client_ip(request, x_forwarded_for),
        plan_id=req.plan_id,
        return_to=req.return_to,
    )
    try:
        output = use_case.execute(command)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserInactiveError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    return _with_session_cookie(response, output)


@router.post("/refresh", response_model=SessionResponse)
def refresh(
    request: Request,
    response: Response,
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE),
    user_agent: str | None = Header(default=None),
    x_forwarded_for: str | None = Header(default=None),
    use_case: RefreshSessionUseCase = Depends(get_refresh_session_use_case),
):
    if not session_token:
        raise HTTPException(status_code=401, detail="Missing refresh token cookie.")
    command = RefreshSessionInput(
        refresh_token=session_token,
        user_agent=user_agent,
        ip=_client_ip(request, x_forwarded_for),
    )
    try:
        output = use_case.execute(command)
    except RefreshSessionInvalidError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserInactiveError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    return _with_session_cookie(response, output)


@router.post("/logout", response_model=LogoutResponse)
def logout(
    response: Response,
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE),
    use_case: LogoutSessionUseCase = Depends(get_logout_session_use_case),
):
    revoked = use_case.execute(LogoutInput(refresh_token=session_token)) if session_token else False
    response.delete_cookie(key=SESSION_COOKIE, path=SESSION_COOKIE_PATH)
    return LogoutResponse(ok=True, revoked=revoked)
