from __future__ import annotations

from pydantic import BaseModel, Field


class PaymentSettingsRequest(BaseModel):
    pix_key: str = Field(default="", max_length=255)
    pix_name: str = Field(default="", max_length=255)
    pix_bank: str = Field(default="", max_length=255)


class PaymentSettingsResponse(BaseModel):
    pix_key: str
    pix_name: str
    pix_bank: str
