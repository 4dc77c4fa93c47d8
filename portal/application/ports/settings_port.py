from __future__ import annotations

from datetime import datetime
from typing import Protocol


class SettingsPort(Protocol):
    def get_values(self, *, keys: tuple[str, ...]) -> dict[str, str]:
        ...

    def upsert_values(self, *, values: dict[str, str], now: datetime) -> None:
        ...
