from __future__ import annotations

from dataclasses import dataclass


PIX_KEY = "pix_key"
PIX_NAME = "pix_name"
PIX_BANK = "pix_bank"

PAYMENT_SETTING_KEYS: tuple[str, ...] = (PIX_KEY, PIX_NAME, PIX_BANK)


@dataclass(frozen=True)
class PaymentSettings:
    pix_key: str
    pix_name: str
    pix_bank: str

    @classmethod
    def from_mapping(cls, values: dict[str, str]) -> PaymentSettings:
        return cls(
            pix_key=values.get(PIX_KEY, ""),
            pix_name=values.get(PIX_NAME, ""),
            pix_bank=values.get(PIX_BANK, ""),
        )

    def as_mapping(self) -> dict[str, str]:
        return {
            PIX_KEY: self.pix_key,
            PIX_NAME: self.pix_name,
            PIX_BANK: self.pix_bank,
        }
