from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return list(default)
    parsed = json.loads(value)
    if not isinstance(parsed, list):
        raise ValueError(f"{name} must be a JSON list.")
    return [str(item) for item in parsed]


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    db_bootstrap: bool
    jwt_secret: str
    jwt_access_ttl_minutes: int
    jwt_refresh_ttl_days: int
    refresh_cookie_secure: bool
    cors_allow_origins: list[str]
    resend_api_key: str
    resend_api_base: str
    notification_from: str
    notification_operator_email: str
    notification_timeout_seconds: float
    notification_max_retries: int
    admin_console_url: str
    vps_control_panel_url: str
    vps_remote_access_url: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        db_bootstrap=_env("DB_BOOTSTRAP", "false").lower() in {"1", "true", "yes"},
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_access_ttl_minutes=int(_env("JWT_ACCESS_TTL_MINUTES", "15")),
        jwt_refresh_ttl_days=int(_env("JWT_REFRESH_TTL_DAYS", "30")),
        refresh_cookie_secure=_env("REFRESH_COOKIE_SECURE", "false").lower() in {"1", "true", "yes"},
        cors_allow_origins=_json_list("CORS_ALLOW_ORIGINS", ["*"]),
        resend_api_key=_env("RESEND_API_KEY", ""),
        resend_api_base=_env("RESEND_API_BASE", "https://api.resend.com"),
        notification_from=_env("NOTIFICATION_FROM", "VyntraCloud <noreply@vyntracloud.com>"),
        notification_operator_email=_env("NOTIFICATION_OPERATOR_EMAIL", "impulsodigitalvendas@gmail.com"),
        notification_timeout_seconds=float(_env("NOTIFICATION_TIMEOUT_SECONDS", "10")),
        notification_max_retries=int(_env("NOTIFICATION_MAX_RETRIES", "3")),
        admin_console_url=_env("ADMIN_CONSOLE_URL", "https://vyntracloud.com/admin"),
        vps_control_panel_url=_env("VPS_CONTROL_PANEL_URL", "https://panel.vyntracloud.com"),
        vps_remote_access_url=_env("VPS_REMOTE_ACCESS_URL", "https://console.vyntracloud.com"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
