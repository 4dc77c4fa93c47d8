from __future__ import annotations

from decimal import Decimal
from urllib.parse import parse_qs, urlsplit

import pytest

from fakes import (
    ADMIN,
    FakeAccountsPort,
    FakeCatalogPort,
    FakeNotificationPort,
    FakePasswordHasher,
    FakeSettingsPort,
    FakeTokenPort,
    InMemoryPortalStore,
    make_plan,
)
from portal.application.dto.auth import LoginLocalInput, RegisterUserInput
from portal.application.dto.navigation import CheckoutEntryInput
from portal.application.dto.orders import CreateOrderInput, GetCheckoutInput, OrderTransitionInput
from portal.application.dto.tickets import CreateTicketInput, RespondTicketInput
from portal.application.use_cases.approve_order import ApproveOrderUseCase
from portal.application.use_cases.create_order import CreateOrderUseCase
from portal.application.use_cases.create_ticket import CreateTicketUseCase
from portal.application.use_cases.get_checkout import GetCheckoutUseCase
from portal.application.use_cases.list_vps import ListVpsUseCase
from portal.application.use_cases.login_local import LoginLocalUseCase
from portal.application.use_cases.register_user import RegisterUserUseCase
from portal.application.use_cases.resolve_actor import ResolveActorUseCase
from portal.application.use_cases.resolve_checkout_entry import ResolveCheckoutEntryUseCase
from portal.application.use_cases.respond_ticket import RespondTicketUseCase
from portal.domain.exceptions import TicketTransitionError


PRO_PLAN_ID = "plan-pro"


class Portal:
    """Instancia os casos de uso sobre as mesmas portas em memoria."""

    def __init__(self, *, notifier: FakeNotificationPort | None = None):
        self.accounts = FakeAccountsPort()
        self.token_port = FakeTokenPort()
        self.catalog = FakeCatalogPort(
            [
                make_plan(),
                make_plan(plan_id=PRO_PLAN_ID, name="VPS Professional", price="47.50", is_popular=True),
            ]
        )
        self.store = InMemoryPortalStore(catalog=self.catalog)
        self.settings = FakeSettingsPort({"pix_key": "pix@vyntracloud.com", "pix_name": "Vyntra", "pix_bank": "Banco"})
        self.notifier = notifier or FakeNotificationPort()

    def sign_up_and_login(self, *, plan_id: str | None = None, return_to: str | None = None):
        RegisterUserUseCase(accounts=self.accounts, password_hasher=FakePasswordHasher()).execute(
            RegisterUserInput(name="Carla Lima", email="carla@example.com", password="senha-forte")
        )
        tokens = LoginLocalUseCase(
            accounts=self.accounts,
            password_hasher=FakePasswordHasher(),
            token_port=self.token_port,
        ).execute(
            LoginLocalInput(
                email="carla@example.com",
                password="senha-forte",
                user_agent="pytest",
                ip=None,
                plan_id=plan_id,
                return_to=return_to,
            )
        )
        payload = self.token_port.read_access_token(token=tokens.access_token)
        actor = ResolveActorUseCase(accounts=self.accounts).execute(payload)
        profile = self.accounts.get_profile(user_id=actor.user_id)
        self.store.owners[actor.user_id] = profile
        return actor, tokens

    def approve(self, order_id: str):
        return ApproveOrderUseCase(
            orders_port=self.store,
            control_panel_url="https://panel.vyntracloud.com",
            remote_access_url="https://console.vyntracloud.com",
        ).execute(actor=ADMIN, command=OrderTransitionInput(order_id=order_id))


def _buy_professional_plan(portal: Portal):
    entry = ResolveCheckoutEntryUseCase().execute(actor=None, command=CheckoutEntryInput(plan_id=PRO_PLAN_ID))
    query = parse_qs(urlsplit(entry.redirect_to).query)
    actor, tokens = portal.sign_up_and_login(plan_id=query["planId"][0], return_to=query["returnTo"][0])
    checkout = GetCheckoutUseCase(catalog_port=portal.catalog, settings_port=portal.settings).execute(
        GetCheckoutInput(plan_id=PRO_PLAN_ID)
    )
    created = CreateOrderUseCase(
        catalog_port=portal.catalog,
        orders_port=portal.store,
        settings_port=portal.settings,
    ).execute(actor=actor, command=CreateOrderInput(plan_id=PRO_PLAN_ID))
    return entry, tokens, checkout, actor, created


def test_anonymous_customer_buys_plan_after_signing_in():
    portal = Portal()

    entry, tokens, checkout, actor, created = _buy_professional_plan(portal)

    assert entry.requires_auth is True
    assert urlsplit(entry.redirect_to).path == "/auth"
    assert tokens.redirect_to == f"/checkout?planId={PRO_PLAN_ID}"
    assert checkout.payment.amount_due == Decimal("47.50")
    assert created.order.status == "pending"
    assert created.order.amount == Decimal("47.50")
    assert created.order.user_id == actor.user_id
    assert portal.store.vps == {}


def test_admin_approval_provisions_exactly_one_vps():
    portal = Portal()
    _, _, _, actor, created = _buy_professional_plan(portal)

    approved = portal.approve(created.order.id)

    assert approved.order.status == "paid"
    assert len(portal.store.vps) == 1
    (vps,) = portal.store.vps.values()
    assert vps.status == "active"
    assert vps.user_id == actor.user_id
    assert vps.plan_id == PRO_PLAN_ID
    assert vps.name == "VPS Professional - Carla Lima"
    assert [item.vps.id for item in ListVpsUseCase(vps_port=portal.store).execute(actor=actor)] == [vps.id]


@pytest.mark.parametrize("notification_fails", [False, True])
def test_ticket_is_kept_whether_or_not_notification_succeeds(notification_fails):
    notifier = FakeNotificationPort(fail=notification_fails)
    portal = Portal(notifier=notifier)
    actor, _ = portal.sign_up_and_login()

    output = CreateTicketUseCase(tickets_port=portal.store, notification_port=notifier).execute(
        actor=actor,
        command=CreateTicketInput(title="Connection issue", message="SSH times out.", priority="high"),
    )

    assert output.ticket.status == "open"
    assert output.ticket.id in portal.store.tickets
    assert output.notification_sent is (not notification_fails)
    assert len(notifier.sent) == (0 if notification_fails else 1)


def test_admin_response_closes_ticket_and_rejects_second_response():
    portal = Portal()
    actor, _ = portal.sign_up_and_login()
    created = CreateTicketUseCase(tickets_port=portal.store, notification_port=portal.notifier).execute(
        actor=actor,
        command=CreateTicketInput(title="Connection issue", message="SSH times out.", priority="high"),
    )
    respond = RespondTicketUseCase(tickets_port=portal.store)

    closed = respond.execute(
        actor=ADMIN,
        command=RespondTicketInput(ticket_id=created.ticket.id, response="Please restart your VPS"),
    )

    assert closed.status == "closed"
    assert closed.admin_response == "Please restart your VPS"
    with pytest.raises(TicketTransitionError):
        respond.execute(actor=ADMIN, command=RespondTicketInput(ticket_id=created.ticket.id, response="Again"))
