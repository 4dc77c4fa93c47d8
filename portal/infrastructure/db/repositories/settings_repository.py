from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import bindparam, text

from portal.application.ports.settings_port import SettingsPort

from .base import SqlRepository


class SqlSettingsRepository(SqlRepository, SettingsPort):
    def get_values(self, *, keys: tuple[str, ...]) -> dict[str, str]:
        if not keys:
            return {}
        stmt = text(
            """
            SELECT key, value
            FROM public.settings
            WHERE key IN :keys
            """
        ).bindparams(bindparam("keys", expanding=True))
        with self._read() as conn:
            rows = conn.execute(stmt, {"keys": list(keys)}).mappings().all()
        return {row["key"]: row["value"] or "" for row in rows}

    def upsert_values(self, *, values: dict[str, str], now: datetime) -> None:
        sql = """
            INSERT INTO public.settings (id, key, value, created_at, updated_at)
            VALUES (:id, :key, :value, :now, :now)
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value,
                updated_at = EXCLUDED.updated_at
        """
        with self._write() as conn:
            for key, value in values.items():
                conn.execute(text(sql), {"id": str(uuid4()), "key": key, "value": value, "now": now})
