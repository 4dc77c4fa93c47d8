from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutEntryInput:
    plan_id: str


@dataclass(frozen=True)
class NavigationOutput:
    redirect_to: str
    requires_auth: bool


@dataclass(frozen=True)
class RouteGuardInput:
    page: str


@dataclass(frozen=True)
class RouteGuardOutput:
    allowed: bool
    redirect_to: str | None
