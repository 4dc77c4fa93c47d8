from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UpdatePaymentSettingsInput:
    pix_key: str
    pix_name: str
    pix_bank: str
