from __future__ import annotations

import json

import httpx
import pytest

from portal.domain.entities.ticket import TicketNotification
from portal.domain.exceptions import NotificationError
from portal.infrastructure.clients.resend_email_client import ResendEmailClient, ResendEmailClientSettings


_REAL_CLIENT = httpx.Client


def _make_client(*, api_key: str | None = "re_test", max_retries: int = 3) -> ResendEmailClient:
    return ResendEmailClient(
        ResendEmailClientSettings(
            api_key=api_key,
            api_base="https://api.resend.test/",
            sender="VyntraCloud <noreply@vyntracloud.com>",
            operator_email="ops@vyntracloud.com",
            admin_console_url="https://vyntracloud.com/admin",
            timeout_seconds=5,
            max_retries=max_retries,
        )
    )


def _notification() -> TicketNotification:
    return TicketNotification(
        title="Servidor fora do ar",
        message="Desde as 10h.",
        priority="high",
        user_email="alice@example.com",
    )


def _script_responses(monkeypatch: pytest.MonkeyPatch, responses: list) -> list[httpx.Request]:
    requests: list[httpx.Request] = []
    scripted = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        outcome = scripted.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return _REAL_CLIENT(*args, **kwargs)

    monkeypatch.setattr("portal.infrastructure.clients.resend_email_client.httpx.Client", client_factory)
    monkeypatch.setattr(
        "portal.infrastructure.clients.resend_email_client.time.sleep",
        lambda _seconds: None,
    )
    return requests


def test_send_ticket_notification_posts_email(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(monkeypatch, [httpx.Response(200, json={"id": "email-1"})])

    _make_client().send_ticket_notification(_notification())

    assert len(requests) == 1
    request = requests[0]
    assert str(request.url) == "https://api.resend.test/emails"
    assert request.headers["Authorization"] == "Bearer re_test"
    body = json.loads(request.content)
    assert body["to"] == ["ops@vyntracloud.com"]
    assert body["from"] == "VyntraCloud <noreply@vyntracloud.com>"
    assert body["subject"] == "[TICKET] Servidor fora do ar - Prioridade: Alta"
    assert "#dc2626" in body["html"]


def test_server_errors_are_retried_until_success(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(
        monkeypatch,
        [
            httpx.Response(502, text="bad gateway"),
            httpx.Response(503, text="unavailable"),
            httpx.Response(200, json={"id": "email-2"}),
        ],
    )

    _make_client(max_retries=3).send_ticket_notification(_notification())

    assert len(requests) == 3


def test_client_errors_are_not_retried(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(monkeypatch, [httpx.Response(422, json={"message": "invalid from"})])

    with pytest.raises(NotificationError):
        _make_client(max_retries=3).send_ticket_notification(_notification())

    assert len(requests) == 1


def test_transport_errors_exhaust_retries(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(
        monkeypatch,
        [httpx.ConnectError("refused"), httpx.ConnectError("refused")],
    )

    with pytest.raises(NotificationError) as exc_info:
        _make_client(max_retries=2).send_ticket_notification(_notification())

    assert len(requests) == 2
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_missing_api_key_fails_without_request(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(monkeypatch, [])

    with pytest.raises(NotificationError):
        _make_client(api_key=None).send_ticket_notification(_notification())

    assert requests == []


def test_success_without_json_body_is_accepted(monkeypatch: pytest.MonkeyPatch):
    requests = _script_responses(monkeypatch, [httpx.Response(200, text="ok")])

    _make_client().send_ticket_notification(_notification())

    assert len(requests) == 1
