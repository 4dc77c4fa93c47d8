from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query

from portal.api.deps import (
    get_optional_actor,
    get_resolve_checkout_entry_use_case,
    get_resolve_route_guard_use_case,
)
from portal.api.schemas.navigation import NavigationResponse, RouteGuardResponse
from portal.application.dto.navigation import CheckoutEntryInput, RouteGuardInput
from portal.application.use_cases.resolve_checkout_entry import ResolveCheckoutEntryUseCase
from portal.application.use_cases.resolve_route_guard import ResolveRouteGuardUseCase
from portal.domain.entities.actor import Actor


router = APIRouter()


@router.get("/v1/navigation/checkout-entry", response_model=NavigationResponse)
def checkout_entry(
    plan_id: str = Query(..., alias="planId", min_length=1, max_length=64),
    actor: Actor | None = Depends(get_optional_actor),
    use_case: ResolveCheckoutEntryUseCase = Depends(get_resolve_checkout_entry_use_case),
):
    output = use_case.execute(actor=actor, command=CheckoutEntryInput(plan_id=plan_id))
    return NavigationResponse(redirect_to=output.redirect_to, requires_auth=output.requires_auth)


@router.get("/v1/navigation/guards/{page}", response_model=RouteGuardResponse)
def route_guard(
    page: Literal["dashboard", "admin"],
    actor: Actor | None = Depends(get_optional_actor),
    use_case: ResolveRouteGuardUseCase = Depends(get_resolve_route_guard_use_case),
):
    output = use_case.execute(actor=actor, command=RouteGuardInput(page=page))
    return RouteGuardResponse(allowed=output.allowed, redirect_to=output.redirect_to)
