from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from portal.domain.entities.order import Order
from portal.domain.entities.plan import Plan
from portal.domain.entities.settings import PaymentSettings
from portal.domain.entities.vps import Vps


@dataclass(frozen=True)
class PaymentInstructions:
    method: str
    recipient_name: str
    bank: str
    pix_key: str
    amount_due: Decimal


@dataclass(frozen=True)
class GetCheckoutInput:
    plan_id: str


@dataclass(frozen=True)
class CheckoutOutput:
    plan: Plan
    payment: PaymentInstructions


@dataclass(frozen=True)
class CreateOrderInput:
    plan_id: str


@dataclass(frozen=True)
class CreateOrderOutput:
    order: Order
    plan: Plan
    payment: PaymentInstructions


@dataclass(frozen=True)
class OrderTransitionInput:
    order_id: str


@dataclass(frozen=True)
class ApproveOrderOutput:
    order: Order
    vps: Vps


@dataclass(frozen=True)
class CancelOrderOutput:
    order: Order


def build_payment_instructions(*, settings: PaymentSettings, amount: Decimal) -> PaymentInstructions:
    return PaymentInstructions(
        method="pix",
        recipient_name=settings.pix_name,
        bank=settings.pix_bank,
        pix_key=settings.pix_key,
        amount_due=amount,
    )
