from __future__ import annotations

from sqlalchemy import text

from portal.application.ports.vps_port import VpsPort
from portal.domain.entities.actor import Actor
from portal.domain.services.access import owner_scope
from portal.infrastructure.db.mappers.orders_mapper import map_row_to_vps_list_item

from .base import SqlRepository, owner_filter


class SqlVpsRepository(SqlRepository, VpsPort):
    def list_vps(self, *, actor: Actor):
        scope_sql, scope_params = owner_filter("v.user_id", owner_scope(actor))
        sql = f"""
            SELECT
                v.id,
                v.user_id,
                v.plan_id,
                v.name,
                v.status,
                v.ip_address,
                v.control_panel_url,
                v.remote_access_url,
                v.created_at,
                v.updated_at,
                p.name AS plan_name,
                p.ram AS plan_ram,
                p.cpu AS plan_cpu,
                p.storage AS plan_storage,
                p.price AS plan_price,
                pr.full_name AS owner_name,
                COALESCE(pr.email, u.email) AS owner_email
            FROM public.vps v
            JOIN public.plans p
              ON p.id = v.plan_id
            JOIN public.users u
              ON u.id = v.user_id
            LEFT JOIN public.profiles pr
              ON pr.user_id = v.user_id
            WHERE true
              {scope_sql}
            ORDER BY v.created_at DESC
        """
        with self._read() as conn:
            rows = conn.execute(text(sql), scope_params).mappings().all()
        return [map_row_to_vps_list_item(row) for row in rows]

    def count_vps(self) -> int:
        with self._read() as conn:
            total = conn.execute(text("SELECT COUNT(*) FROM public.vps")).scalar_one()
        return int(total)
