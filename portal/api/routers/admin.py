from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from portal.api.deps import (
    get_admin_overview_use_case,
    get_approve_order_use_case,
    get_cancel_order_use_case,
    get_get_payment_settings_use_case,
    get_list_orders_use_case,
    get_list_tickets_use_case,
    get_list_vps_use_case,
    get_respond_ticket_use_case,
    get_update_payment_settings_use_case,
    require_admin,
)
from portal.api.schemas.admin import AdminCountersResponse, AdminOverviewResponse, AdminUserResponse
from portal.api.schemas.orders import (
    ApproveOrderResponse,
    CancelOrderResponse,
    OrderListItemResponse,
    order_list_item_response,
    order_response,
)
from portal.api.schemas.settings import PaymentSettingsRequest, PaymentSettingsResponse
from portal.api.schemas.tickets import (
    RespondTicketRequest,
    TicketListItemResponse,
    TicketResponse,
    ticket_list_item_response,
    ticket_response,
)
from portal.api.schemas.vps import VpsListItemResponse, vps_list_item_response, vps_response
from portal.application.dto.orders import OrderTransitionInput
from portal.application.dto.settings import UpdatePaymentSettingsInput
from portal.application.dto.tickets import RespondTicketInput
from portal.application.use_cases.approve_order import ApproveOrderUseCase
from portal.application.use_cases.cancel_order import CancelOrderUseCase
from portal.application.use_cases.get_admin_overview import GetAdminOverviewUseCase
from portal.application.use_cases.get_payment_settings import GetPaymentSettingsUseCase
from portal.application.use_cases.list_orders import ListOrdersUseCase
from portal.application.use_cases.list_tickets import ListTicketsUseCase
from portal.application.use_cases.list_vps import ListVpsUseCase
from portal.application.use_cases.respond_ticket import RespondTicketUseCase
from portal.application.use_cases.update_payment_settings import UpdatePaymentSettingsUseCase
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import (
    AdminRequiredError,
    OrderNotFoundError,
    OrderTransitionError,
    TicketInputError,
    TicketNotFoundError,
    TicketTransitionError,
)


router = APIRouter()


@router.get("/v1/admin/overview", response_model=AdminOverviewResponse)
def admin_overview(
    actor: Actor = Depends(require_admin),
    use_case: GetAdminOverviewUseCase = Depends(get_admin_overview_use_case),
):
    output = use_case.execute(actor=actor)
    counters = output.counters
    return AdminOverviewResponse(
        counters=AdminCountersResponse(
            users=counters.users,
            vps=counters.vps,
            orders_pending=counters.orders_pending,
            orders_paid=counters.orders_paid,
            orders_cancelled=counters.orders_cancelled,
            tickets_open=counters.tickets_open,
        ),
        users=[
            AdminUserResponse(
                id=profile.id,
                user_id=profile.user_id,
                email=profile.email,
                full_name=profile.full_name,
                phone=profile.phone,
                is_admin=profile.is_admin,
                created_at=profile.created_at,
            )
            for profile in output.users
        ],
    )


@router.get("/v1/admin/orders", response_model=list[OrderListItemResponse])
def admin_list_orders(
    actor: Actor = Depends(require_admin),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
):
    return [order_list_item_response(item) for item in use_case.execute(actor=actor)]


@router.post("/v1/admin/orders/{order_id}/approve", response_model=ApproveOrderResponse)
def admin_approve_order(
    order_id: UUID,
    actor: Actor = Depends(require_admin),
    use_case: ApproveOrderUseCase = Depends(get_approve_order_use_case),
):
    try:
        output = use_case.execute(actor=actor, command=OrderTransitionInput(order_id=str(order_id)))
    except AdminRequiredError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except OrderTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return ApproveOrderResponse(order=order_response(output.order), vps=vps_response(output.vps))


@router.post("/v1/admin/orders/{order_id}/cancel", response_model=CancelOrderResponse)
def admin_cancel_order(
    order_id: UUID,
    actor: Actor = Depends(require_admin),
    use_case: CancelOrderUseCase = Depends(get_cancel_order_use_case),
):
    try:
        output = use_case.execute(actor=actor, command=OrderTransitionInput(order_id=str(order_id)))
    except AdminRequiredError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except OrderNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except OrderTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return CancelOrderResponse(order=order_response(output.order))


@router.get("/v1/admin/vps", response_model=list[VpsListItemResponse])
def admin_list_vps(
    actor: Actor = Depends(require_admin),
    use_case: ListVpsUseCase = Depends(get_list_vps_use_case),
):
    return [vps_list_item_response(item) for item in use_case.execute(actor=actor)]


@router.get("/v1/admin/tickets", response_model=list[TicketListItemResponse])
def admin_list_tickets(
    actor: Actor = Depends(require_admin),
    use_case: ListTicketsUseCase = Depends(get_list_tickets_use_case),
):
    return [ticket_list_item_response(item) for item in use_case.execute(actor=actor)]


@router.post("/v1/admin/tickets/{ticket_id}/respond", response_model=TicketResponse)
def admin_respond_ticket(
    ticket_id: UUID,
    req: RespondTicketRequest,
    actor: Actor = Depends(require_admin),
    use_case: RespondTicketUseCase = Depends(get_respond_ticket_use_case),
):
    try:
        ticket = use_case.execute(
            actor=actor,
            command=RespondTicketInput(ticket_id=str(ticket_id), response=req.response),
        )
    except AdminRequiredError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except TicketInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except TicketTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return ticket_response(ticket)


@router.get("/v1/admin/settings/payment", response_model=PaymentSettingsResponse)
def admin_get_payment_settings(
    _actor: Actor = Depends(require_admin),
    use_case: GetPaymentSettingsUseCase = Depends(get_get_payment_settings_use_case),
):
    settings = use_case.execute()
    return PaymentSettingsResponse(
        pix_key=settings.pix_key,
        pix_name=settings.pix_name,
        pix_bank=settings.pix_bank,
    )


@router.put("/v1/admin/settings/payment", response_model=PaymentSettingsResponse)
def admin_update_payment_settings(
    req: PaymentSettingsRequest,
    actor: Actor = Depends(require_admin),
    use_case: UpdatePaymentSettingsUseCase = Depends(get_update_payment_settings_use_case),
):
    try:
        settings = use_case.execute(
            actor=actor,
            command=UpdatePaymentSettingsInput(
                pix_key=req.pix_key,
                pix_name=req.pix_name,
                pix_bank=req.pix_bank,
            ),
        )
    except AdminRequiredError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return PaymentSettingsResponse(
        pix_key=settings.pix_key,
        pix_name=settings.pix_name,
        pix_bank=settings.pix_bank,
    )
