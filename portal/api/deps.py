from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from portal.application.use_cases.approve_order import ApproveOrderUseCase
from portal.application.use_cases.cancel_order import CancelOrderUseCase
from portal.application.use_cases.create_order import CreateOrderUseCase
from portal.application.use_cases.create_ticket import CreateTicketUseCase
from portal.application.use_cases.get_admin_overview import GetAdminOverviewUseCase
from portal.application.use_cases.get_checkout import GetCheckoutUseCase
from portal.application.use_cases.get_me import GetMeUseCase
from portal.application.use_cases.get_payment_settings import GetPaymentSettingsUseCase
from portal.application.use_cases.get_plan import GetPlanUseCase
from portal.application.use_cases.list_orders import ListOrdersUseCase
from portal.application.use_cases.list_plans import ListPlansUseCase
from portal.application.use_cases.list_tickets import ListTicketsUseCase
from portal.application.use_cases.list_vps import ListVpsUseCase
from portal.application.use_cases.login_local import LoginLocalUseCase
from portal.application.use_cases.logout_session import LogoutSessionUseCase
from portal.application.use_cases.refresh_session import RefreshSessionUseCase
from portal.application.use_cases.register_user import RegisterUserUseCase
from portal.application.use_cases.resolve_actor import ResolveActorUseCase
from portal.application.use_cases.resolve_checkout_entry import ResolveCheckoutEntryUseCase
from portal.application.use_cases.resolve_route_guard import ResolveRouteGuardUseCase
from portal.application.use_cases.respond_ticket import RespondTicketUseCase
from portal.application.use_cases.update_payment_settings import UpdatePaymentSettingsUseCase
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import AdminRequiredError, InvalidCredentialsError, UserInactiveError
from portal.infrastructure.clients.resend_email_client import ResendEmailClient, ResendEmailClientSettings
from portal.infrastructure.db.engine import get_engine
from portal.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from portal.infrastructure.db.repositories.catalog_repository import SqlCatalogRepository
from portal.infrastructure.db.repositories.orders_repository import SqlOrdersRepository
from portal.infrastructure.db.repositories.settings_repository import SqlSettingsRepository
from portal.infrastructure.db.repositories.tickets_repository import SqlTicketsRepository
from portal.infrastructure.db.repositories.vps_repository import SqlVpsRepository
from portal.infrastructure.security.password_hasher import PasslibPasswordHasher
from portal.infrastructure.security.token_service import JwtTokenService
from portal.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


def _get_accounts_repository() -> SqlAccountsRepository:
    return SqlAccountsRepository(_get_db_engine())


def _get_catalog_repository() -> SqlCatalogRepository:
    return SqlCatalogRepository(_get_db_engine())


def _get_orders_repository() -> SqlOrdersRepository:
    return SqlOrdersRepository(_get_db_engine())


def _get_vps_repository() -> SqlVpsRepository:
    return SqlVpsRepository(_get_db_engine())


def _get_tickets_repository() -> SqlTicketsRepository:
    return SqlTicketsRepository(_get_db_engine())


def _get_settings_repository() -> SqlSettingsRepository:
    return SqlSettingsRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


@lru_cache(maxsize=1)
def _get_cached_token_service(jwt_secret: str, access_ttl_minutes: int, refresh_ttl_days: int) -> JwtTokenService:
    return JwtTokenService(
        jwt_secret=jwt_secret,
        access_ttl_minutes=access_ttl_minutes,
        refresh_ttl_days=refresh_ttl_days,
    )


def get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return _get_cached_token_service(
        settings.jwt_secret,
        settings.jwt_access_ttl_minutes,
        settings.jwt_refresh_ttl_days,
    )


def _get_notification_client() -> ResendEmailClient:
    # Sem RESEND_API_KEY o cliente ainda e criado; o envio falha e o ticket segue.
    settings = get_settings()
    return ResendEmailClient(
        ResendEmailClientSettings(
            api_key=settings.resend_api_key,
            api_base=settings.resend_api_base,
            sender=settings.notification_from,
            operator_email=settings.notification_operator_email,
            admin_console_url=settings.admin_console_url,
            timeout_seconds=settings.notification_timeout_seconds,
            max_retries=settings.notification_max_retries,
        )
    )


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        accounts=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_login_local_use_case() -> LoginLocalUseCase:
    return LoginLocalUseCase(
        accounts=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
        token_port=get_token_service(),
    )


def get_refresh_session_use_case() -> RefreshSessionUseCase:
    return RefreshSessionUseCase(
        accounts=_get_accounts_repository(),
        token_port=get_token_service(),
    )


def get_logout_session_use_case() -> LogoutSessionUseCase:
    return LogoutSessionUseCase(
        accounts=_get_accounts_repository(),
        token_port=get_token_service(),
    )


def get_resolve_actor_use_case() -> ResolveActorUseCase:
    return ResolveActorUseCase(accounts=_get_accounts_repository())


def get_get_me_use_case() -> GetMeUseCase:
    return GetMeUseCase(accounts=_get_accounts_repository())


def get_list_plans_use_case() -> ListPlansUseCase:
    return ListPlansUseCase(catalog_port=_get_catalog_repository())


def get_get_plan_use_case() -> GetPlanUseCase:
    return GetPlanUseCase(catalog_port=_get_catalog_repository())


def get_get_checkout_use_case() -> GetCheckoutUseCase:
    return GetCheckoutUseCase(
        catalog_port=_get_catalog_repository(),
        settings_port=_get_settings_repository(),
    )


def get_create_order_use_case() -> CreateOrderUseCase:
    return CreateOrderUseCase(
        catalog_port=_get_catalog_repository(),
        orders_port=_get_orders_repository(),
        settings_port=_get_settings_repository(),
    )


def get_list_orders_use_case() -> ListOrdersUseCase:
    return ListOrdersUseCase(orders_port=_get_orders_repository())


def get_approve_order_use_case() -> ApproveOrderUseCase:
    settings = get_settings()
    return ApproveOrderUseCase(
        orders_port=_get_orders_repository(),
        control_panel_url=settings.vps_control_panel_url,
        remote_access_url=settings.vps_remote_access_url,
    )


def get_cancel_order_use_case() -> CancelOrderUseCase:
    return CancelOrderUseCase(orders_port=_get_orders_repository())


def get_list_vps_use_case() -> ListVpsUseCase:
    return ListVpsUseCase(vps_port=_get_vps_repository())


def get_create_ticket_use_case() -> CreateTicketUseCase:
    return CreateTicketUseCase(
        tickets_port=_get_tickets_repository(),
        notification_port=_get_notification_client(),
    )


def get_list_tickets_use_case() -> ListTicketsUseCase:
    return ListTicketsUseCase(tickets_port=_get_tickets_repository())


def get_respond_ticket_use_case() -> RespondTicketUseCase:
    return RespondTicketUseCase(tickets_port=_get_tickets_repository())


def get_get_payment_settings_use_case() -> GetPaymentSettingsUseCase:
    return GetPaymentSettingsUseCase(settings_port=_get_settings_repository())


def get_update_payment_settings_use_case() -> UpdatePaymentSettingsUseCase:
    return UpdatePaymentSettingsUseCase(settings_port=_get_settings_repository())


def get_admin_overview_use_case() -> GetAdminOverviewUseCase:
    return GetAdminOverviewUseCase(
        accounts=_get_accounts_repository(),
        orders_port=_get_orders_repository(),
        vps_port=_get_vps_repository(),
        tickets_port=_get_tickets_repository(),
    )


def get_resolve_checkout_entry_use_case() -> ResolveCheckoutEntryUseCase:
    return ResolveCheckoutEntryUseCase()


def get_resolve_route_guard_use_case() -> ResolveRouteGuardUseCase:
    return ResolveRouteGuardUseCase()


def _parse_bearer(authorization: str) -> str:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing access token.")
    return token


def _resolve_actor(
    authorization: str,
    token_service: JwtTokenService,
    resolve_actor: ResolveActorUseCase,
) -> Actor:
    token = _parse_bearer(authorization)
    try:
        payload = token_service.read_access_token(token=token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    try:
        return resolve_actor.execute(payload)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserInactiveError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc


def get_current_actor(
    authorization: str = Header(...),
    token_service: JwtTokenService = Depends(get_token_service),
    resolve_actor: ResolveActorUseCase = Depends(get_resolve_actor_use_case),
) -> Actor:
    return _resolve_actor(authorization, token_service, resolve_actor)


def get_optional_actor(authorization: str | None = Header(default=None)) -> Actor | None:
    """Ator das rotas publicas de navegacao.

    Token e repositorio so sao montados quando ha header; token invalido,
    vencido ou de usuario inexistente conta como visitante anonimo.
    """
    if not authorization:
        return None
    try:
        return _resolve_actor(authorization, get_token_service(), get_resolve_actor_use_case())
    except HTTPException as exc:
        if exc.status_code == 401:
            return None
        raise


def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    if not actor.is_admin:
        raise HTTPException(
            status_code=403,
            detail=str(AdminRequiredError("Administrator access is required.")),
        )
    return actor
