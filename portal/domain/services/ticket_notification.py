from __future__ import annotations

from html import escape

from portal.domain.entities.ticket import TicketNotification
from portal.domain.services.status_labels import priority_color, priority_label


def build_ticket_subject(notification: TicketNotification) -> str:
    return f"[TICKET] {notification.title} - Prioridade: {priority_label(notification.priority)}"


def build_ticket_html(notification: TicketNotification, *, admin_console_url: str) -> str:
    label = priority_label(notification.priority)
    color = priority_color(notification.priority)
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<h1 style="margin: 0;">VyntraCloud</h1>'
        "<p>Novo Ticket de Suporte</p>"
        f'<span style="background-color: {color}; color: white; padding: 6px 12px; '
        f'border-radius: 20px; font-weight: bold;">{escape(label)}</span> '
        f"<span>de {escape(notification.user_email)}</span>"
        f"<h2>{escape(notification.title)}</h2>"
        "<h3>Mensagem do Cliente:</h3>"
        f'<p style="white-space: pre-wrap;">{escape(notification.message)}</p>'
        f'<a href="{escape(admin_console_url, quote=True)}">Acessar Painel Admin</a>'
        "<hr>"
        "<p>Este ticket foi criado automaticamente pelo sistema VyntraCloud.</p>"
        "</div>"
    )
