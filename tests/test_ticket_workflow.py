from __future__ import annotations

import pytest

from fakes import ADMIN, CUSTOMER, OTHER_CUSTOMER, FakeCatalogPort, FakeNotificationPort, InMemoryPortalStore, make_profile
from portal.application.dto.tickets import CreateTicketInput, RespondTicketInput
from portal.application.use_cases.create_ticket import CreateTicketUseCase
from portal.application.use_cases.list_tickets import ListTicketsUseCase
from portal.application.use_cases.respond_ticket import RespondTicketUseCase
from portal.domain.exceptions import (
    AdminRequiredError,
    TicketInputError,
    TicketNotFoundError,
    TicketTransitionError,
)


@pytest.fixture
def store():
    return InMemoryPortalStore(
        catalog=FakeCatalogPort(),
        owners=[make_profile(CUSTOMER), make_profile(OTHER_CUSTOMER), make_profile(ADMIN)],
    )


def _open_ticket(store, notifier=None, *, actor=CUSTOMER, **kwargs):
    use_case = CreateTicketUseCase(tickets_port=store, notification_port=notifier or FakeNotificationPort())
    fields = {"title": "Servidor lento", "message": "A VPS esta lenta desde ontem."}
    fields.update(kwargs)
    return use_case.execute(actor=actor, command=CreateTicketInput(**fields))


def test_create_ticket_defaults_to_medium_priority_and_notifies(store):
    notifier = FakeNotificationPort()

    output = _open_ticket(store, notifier)

    assert output.ticket.status == "open"
    assert output.ticket.priority == "medium"
    assert output.ticket.user_id == CUSTOMER.user_id
    assert output.notification_sent is True
    assert len(notifier.sent) == 1
    sent = notifier.sent[0]
    assert sent.title == "Servidor lento"
    assert sent.priority == "medium"
    assert sent.user_email == CUSTOMER.email


def test_create_ticket_normalizes_priority(store):
    output = _open_ticket(store, priority=" HIGH ")

    assert output.ticket.priority == "high"


def test_create_ticket_rejects_unknown_priority(store):
    with pytest.raises(TicketInputError):
        _open_ticket(store, priority="urgent")
    assert store.tickets == {}


@pytest.mark.parametrize("fields", [{"title": "   "}, {"message": ""}])
def test_create_ticket_rejects_blank_text(store, fields):
    notifier = FakeNotificationPort()

    with pytest.raises(TicketInputError):
        _open_ticket(store, notifier, **fields)

    assert store.tickets == {}
    assert notifier.sent == []


def test_notification_failure_keeps_the_ticket(store):
    output = _open_ticket(store, FakeNotificationPort(fail=True))

    assert output.notification_sent is False
    assert store.tickets[output.ticket.id].status == "open"


def test_respond_ticket_closes_it_once(store):
    created = _open_ticket(store)
    use_case = RespondTicketUseCase(tickets_port=store)

    closed = use_case.execute(
        actor=ADMIN,
        command=RespondTicketInput(ticket_id=created.ticket.id, response="  Reiniciamos o servidor.  "),
    )

    assert closed.status == "closed"
    assert closed.admin_response == "Reiniciamos o servidor."
    with pytest.raises(TicketTransitionError):
        use_case.execute(actor=ADMIN, command=RespondTicketInput(ticket_id=created.ticket.id, response="De novo"))
    assert store.tickets[created.ticket.id].admin_response == "Reiniciamos o servidor."


def test_respond_ticket_requires_admin_and_text(store):
    created = _open_ticket(store)
    use_case = RespondTicketUseCase(tickets_port=store)

    with pytest.raises(AdminRequiredError):
        use_case.execute(actor=CUSTOMER, command=RespondTicketInput(ticket_id=created.ticket.id, response="ok"))
    with pytest.raises(TicketInputError):
        use_case.execute(actor=ADMIN, command=RespondTicketInput(ticket_id=created.ticket.id, response="  "))
    with pytest.raises(TicketNotFoundError):
        use_case.execute(actor=ADMIN, command=RespondTicketInput(ticket_id="missing", response="ok"))
    assert store.tickets[created.ticket.id].status == "open"


def test_list_tickets_is_scoped_to_owner_unless_admin(store):
    mine = _open_ticket(store)
    theirs = _open_ticket(store, actor=OTHER_CUSTOMER, title="Outro")
    use_case = ListTicketsUseCase(tickets_port=store)

    assert [item.ticket.id for item in use_case.execute(actor=CUSTOMER)] == [mine.ticket.id]
    admin_items = use_case.execute(actor=ADMIN)
    assert {item.ticket.id for item in admin_items} == {mine.ticket.id, theirs.ticket.id}
    owners = {item.ticket.id: item.owner_email for item in admin_items}
    assert owners[theirs.ticket.id] == OTHER_CUSTOMER.email
