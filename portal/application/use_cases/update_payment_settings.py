from __future__ import annotations

import logging

from portal.application.dto.settings import UpdatePaymentSettingsInput
from portal.application.ports.settings_port import SettingsPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.settings import PaymentSettings
from portal.domain.services.access import ensure_admin

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class UpdatePaymentSettingsUseCase:
    def __init__(self, *, settings_port: SettingsPort):
        self._settings_port = settings_port

    def execute(self, *, actor: Actor, command: UpdatePaymentSettingsInput) -> PaymentSettings:
        ensure_admin(actor)
        settings = PaymentSettings(
            pix_key=command.pix_key,
            pix_name=command.pix_name,
            pix_bank=command.pix_bank,
        )
        self._settings_port.upsert_values(values=settings.as_mapping(), now=utcnow())
        logger.info("update_payment_settings: saved by=%s", actor.user_id)
        return settings
