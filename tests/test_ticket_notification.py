from __future__ import annotations

from portal.domain.entities.ticket import TicketNotification
from portal.domain.services.ticket_notification import build_ticket_html, build_ticket_subject


def _notification(**kwargs) -> TicketNotification:
    fields = {
        "title": "Sem acesso",
        "message": "Nao consigo entrar no painel.",
        "priority": "high",
        "user_email": "alice@example.com",
    }
    fields.update(kwargs)
    return TicketNotification(**fields)


def test_subject_carries_title_and_priority_label():
    assert build_ticket_subject(_notification()) == "[TICKET] Sem acesso - Prioridade: Alta"
    assert build_ticket_subject(_notification(priority="unknown")) == "[TICKET] Sem acesso - Prioridade: Média"


def test_html_uses_priority_colour_and_admin_link():
    html = build_ticket_html(_notification(), admin_console_url="https://vyntracloud.com/admin")

    assert "#dc2626" in html
    assert "Alta" in html
    assert "alice@example.com" in html
    assert 'href="https://vyntracloud.com/admin"' in html


def test_html_escapes_customer_content():
    html = build_ticket_html(
        _notification(title="<script>alert(1)</script>", message="a & b"),
        admin_console_url="https://admin",
    )

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "a &amp; b" in html
