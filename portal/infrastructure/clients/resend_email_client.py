from __future__ import annotations

from dataclasses import dataclass
import logging
import time

import httpx

from portal.application.ports.notification_port import NotificationPort
from portal.domain.entities.ticket import TicketNotification
from portal.domain.exceptions import NotificationError
from portal.domain.services.ticket_notification import build_ticket_html, build_ticket_subject


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResendEmailClientSettings:
    api_key: str | None
    api_base: str
    sender: str
    operator_email: str
    admin_console_url: str
    timeout_seconds: float = 10.0
    max_retries: int = 3


class _RetryableSendError(RuntimeError):
    pass


class ResendEmailClient(NotificationPort):
    def __init__(self, settings: ResendEmailClientSettings):
        self._settings = settings

    def send_ticket_notification(self, notification: TicketNotification) -> None:
        payload = {
            "from": self._settings.sender,
            "to": [self._settings.operator_email],
            "subject": build_ticket_subject(notification),
            "html": build_ticket_html(notification, admin_console_url=self._settings.admin_console_url),
        }
        email_id = self._post_email(payload)
        logger.info(
            "resend_email_client: sent email_id=%s priority=%s to=%s",
            email_id,
            notification.priority,
            self._settings.operator_email,
        )

    def _post_email(self, payload: dict) -> str | None:
        if not self._settings.api_key:
            raise NotificationError("RESEND_API_KEY is not configured.")

        url = f"{self._settings.api_base.rstrip('/')}/emails"
        headers = {"Authorization": f"Bearer {self._settings.api_key}"}
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                    response = client.post(url, json=payload, headers=headers)
                if response.status_code >= 500:
                    raise _RetryableSendError(f"Resend returned {response.status_code}.")
                if response.status_code >= 400:
                    # Erro do cliente: repetir nao muda o resultado.
                    raise NotificationError(
                        f"Resend rejected the email with status {response.status_code}: {response.text}"
                    )
                return _email_id(response)
            except (httpx.HTTPError, _RetryableSendError) as exc:
                last_exc = exc
                if attempt == attempts:
                    break
                logger.warning(
                    "resend_email_client: send_retry attempt=%s/%s error=%s",
                    attempt,
                    attempts,
                    exc,
                )
                time.sleep(delay)
                delay *= 2

        raise NotificationError(f"Email delivery failed after retries: {last_exc}") from last_exc


def _email_id(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("id")
    return None
