from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from portal.api.deps import (
    get_create_order_use_case,
    get_current_actor,
    get_get_checkout_use_case,
    get_list_orders_use_case,
)
from portal.api.schemas.catalog import plan_response
from portal.api.schemas.orders import (
    CheckoutResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    OrderListItemResponse,
    order_list_item_response,
    order_response,
    payment_response,
)
from portal.application.dto.orders import CreateOrderInput, GetCheckoutInput
from portal.application.use_cases.create_order import CreateOrderUseCase
from portal.application.use_cases.get_checkout import GetCheckoutUseCase
from portal.application.use_cases.list_orders import ListOrdersUseCase
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import PlanNotFoundError, PlanUnavailableError


router = APIRouter()


@router.get("/v1/checkout/{plan_id}", response_model=CheckoutResponse)
def get_checkout(
    plan_id: UUID,
    _actor: Actor = Depends(get_current_actor),
    use_case: GetCheckoutUseCase = Depends(get_get_checkout_use_case),
):
    try:
        output = use_case.execute(GetCheckoutInput(plan_id=str(plan_id)))
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PlanUnavailableError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return CheckoutResponse(plan=plan_response(output.plan), payment=payment_response(output.payment))


@router.post("/v1/orders", response_model=CreateOrderResponse, status_code=201)
def create_order(
    req: CreateOrderRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    try:
        output = use_case.execute(actor=actor, command=CreateOrderInput(plan_id=str(req.plan_id)))
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PlanUnavailableError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return CreateOrderResponse(
        order=order_response(output.order),
        plan=plan_response(output.plan),
        payment=payment_response(output.payment),
    )


@router.get("/v1/orders", response_model=list[OrderListItemResponse])
def list_orders(
    actor: Actor = Depends(get_current_actor),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
):
    return [order_list_item_response(item) for item in use_case.execute(actor=actor)]
