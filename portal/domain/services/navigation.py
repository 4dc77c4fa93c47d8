from __future__ import annotations

from urllib.parse import urlencode


HOME_PATH = "/"
AUTH_PATH = "/auth"
CHECKOUT_PATH = "/checkout"
DASHBOARD_PATH = "/dashboard"
ADMIN_PATH = "/admin"


def home_path() -> str:
    return HOME_PATH


def dashboard_path() -> str:
    return DASHBOARD_PATH


def admin_path() -> str:
    return ADMIN_PATH


def checkout_path(plan_id: str) -> str:
    return f"{CHECKOUT_PATH}?{urlencode({'planId': plan_id})}"


def auth_path(*, plan_id: str | None = None, return_to: str | None = None) -> str:
    params: dict[str, str] = {}
    if plan_id:
        params["planId"] = plan_id
    if return_to:
        params["returnTo"] = return_to
    if not params:
        return AUTH_PATH
    return f"{AUTH_PATH}?{urlencode(params)}"


def is_safe_return_path(value: str | None) -> bool:
    """Aceita so caminhos relativos ao proprio site.

    Navegadores tratam `\\` como `/`, entao `/\\host` vira `//host`.
    """
    if not value or not value.startswith("/") or value.startswith("//"):
        return False
    return "\\" not in value and not any(ord(char) < 0x20 or ord(char) == 0x7F for char in value)


def resolve_post_login_destination(
    *,
    plan_id: str | None,
    return_to: str | None,
    is_admin: bool,
) -> str:
    if plan_id:
        return checkout_path(plan_id)
    if is_safe_return_path(return_to):
        return return_to  # type: ignore[return-value]
    return admin_path() if is_admin else dashboard_path()


def resolve_checkout_entry(*, plan_id: str, authenticated: bool) -> str:
    if not authenticated:
        return auth_path(plan_id=plan_id, return_to=CHECKOUT_PATH)
    return checkout_path(plan_id)


def guard_dashboard(*, authenticated: bool, is_admin: bool) -> str | None:
    """Destino de redirecionamento para o dashboard do cliente, ou None se liberado."""
    if not authenticated:
        return auth_path()
    if is_admin:
        return admin_path()
    return None


def guard_admin_console(*, authenticated: bool, is_admin: bool) -> str | None:
    if not authenticated:
        return auth_path()
    if not is_admin:
        return dashboard_path()
    return None


def member_home_path(*, is_admin: bool) -> str:
    return admin_path() if is_admin else dashboard_path()
