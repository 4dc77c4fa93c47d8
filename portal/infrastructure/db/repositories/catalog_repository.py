from __future__ import annotations

from sqlalchemy import text

from portal.application.ports.catalog_port import CatalogPort
from portal.infrastructure.db.mappers.catalog_mapper import map_row_to_plan

from .base import SqlRepository


_PLAN_COLUMNS = "id, name, price, ram, cpu, storage, features, is_active, is_popular, created_at"


class SqlCatalogRepository(SqlRepository, CatalogPort):
    def list_active_plans(self):
        sql = f"""
            SELECT {_PLAN_COLUMNS}
            FROM public.plans
            WHERE is_active = true
            ORDER BY price ASC, name ASC
        """
        with self._read() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return [map_row_to_plan(row) for row in rows]

    def get_plan_by_id(self, *, plan_id: str):
        # Inclui planos inativos; quem chama decide se podem ser comprados.
        sql = f"""
            SELECT {_PLAN_COLUMNS}
            FROM public.plans
            WHERE id = CAST(:plan_id AS uuid)
            LIMIT 1
        """
        with self._read() as conn:
            row = conn.execute(text(sql), {"plan_id": plan_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_plan(row)
