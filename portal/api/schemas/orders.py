from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from portal.api.schemas.catalog import PlanResponse
from portal.api.schemas.common import StatusBadgeResponse, status_badge
from portal.api.schemas.vps import VpsResponse
from portal.application.dto.orders import PaymentInstructions
from portal.domain.entities.order import Order, OrderListItem


class CreateOrderRequest(BaseModel):
    plan_id: UUID = Field(..., alias="planId")

    model_config = {"populate_by_name": True}


class PaymentInstructionsResponse(BaseModel):
    method: str
    recipient_name: str
    bank: str
    pix_key: str
    amount_due: Decimal


class CheckoutResponse(BaseModel):
    plan: PlanResponse
    payment: PaymentInstructionsResponse


class OrderResponse(BaseModel):
    id: str
    user_id: str
    plan_id: str
    amount: Decimal
    status: str
    status_badge: StatusBadgeResponse
    payment_method: str | None
    pix_code: str | None
    vps_id: str | None
    created_at: datetime
    updated_at: datetime


class OrderListItemResponse(OrderResponse):
    plan_name: str
    plan_ram: str
    plan_cpu: str
    plan_storage: str
    plan_price: Decimal
    owner_name: str | None
    owner_email: str | None


class CreateOrderResponse(BaseModel):
    order: OrderResponse
    plan: PlanResponse
    payment: PaymentInstructionsResponse


class ApproveOrderResponse(BaseModel):
    order: OrderResponse
    vps: VpsResponse


class CancelOrderResponse(BaseModel):
    order: OrderResponse


def payment_response(payment: PaymentInstructions) -> PaymentInstructionsResponse:
    return PaymentInstructionsResponse(
        method=payment.method,
        recipient_name=payment.recipient_name,
        bank=payment.bank,
        pix_key=payment.pix_key,
        amount_due=payment.amount_due,
    )


def _order_fields(order: Order) -> dict:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "plan_id": order.plan_id,
        "amount": order.amount,
        "status": order.status,
        "status_badge": status_badge(order.status),
        "payment_method": order.payment_method,
        "pix_code": order.pix_code,
        "vps_id": order.vps_id,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def order_response(order: Order) -> OrderResponse:
    return OrderResponse(**_order_fields(order))


def order_list_item_response(item: OrderListItem) -> OrderListItemResponse:
    return OrderListItemResponse(
        **_order_fields(item.order),
        plan_name=item.plan_name,
        plan_ram=item.plan_ram,
        plan_cpu=item.plan_cpu,
        plan_storage=item.plan_storage,
        plan_price=item.plan_price,
        owner_name=item.owner_name,
        owner_email=item.owner_email,
    )
