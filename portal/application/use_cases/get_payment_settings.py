from __future__ import annotations

from portal.application.ports.settings_port import SettingsPort
from portal.domain.entities.settings import PAYMENT_SETTING_KEYS, PaymentSettings


class GetPaymentSettingsUseCase:
    def __init__(self, *, settings_port: SettingsPort):
        self._settings_port = settings_port

    def execute(self) -> PaymentSettings:
        values = self._settings_port.get_values(keys=PAYMENT_SETTING_KEYS)
        return PaymentSettings.from_mapping(values)
