from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from portal.application.ports.tickets_port import TicketsPort
from portal.domain.entities.actor import Actor
from portal.domain.services.access import owner_scope
from portal.infrastructure.db.mappers.tickets_mapper import map_row_to_ticket, map_row_to_ticket_list_item

from .base import SqlRepository, owner_filter


_TICKET_COLUMNS = "id, user_id, title, message, priority, status, admin_response, created_at, updated_at"


class SqlTicketsRepository(SqlRepository, TicketsPort):
    def create_ticket(
        self,
        *,
        ticket_id: str,
        user_id: str,
        title: str,
        message: str,
        priority: str,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO public.tickets (
                id, user_id, title, message, priority, status, admin_response, created_at, updated_at
            ) VALUES (
                :id, :user_id, :title, :message, :priority, 'open', NULL, :now, :now
            )
            RETURNING {_TICKET_COLUMNS}
        """
        params = {
            "id": ticket_id,
            "user_id": user_id,
            "title": title,
            "message": message,
            "priority": priority,
            "now": now,
        }
        with self._write() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_ticket(row)

    def get_ticket(self, *, ticket_id: str, actor: Actor):
        scope_sql, scope_params = owner_filter("user_id", owner_scope(actor))
        sql = f"""
            SELECT {_TICKET_COLUMNS}
            FROM public.tickets
            WHERE id = CAST(:ticket_id AS uuid)
              {scope_sql}
            LIMIT 1
        """
        with self._read() as conn:
            row = conn.execute(text(sql), {"ticket_id": ticket_id, **scope_params}).mappings().first()
        if row is None:
            return None
        return map_row_to_ticket(row)

    def list_tickets(self, *, actor: Actor):
        scope_sql, scope_params = owner_filter("t.user_id", owner_scope(actor))
        sql = f"""
            SELECT
                t.id,
                t.user_id,
                t.title,
                t.message,
                t.priority,
                t.status,
                t.admin_response,
                t.created_at,
                t.updated_at,
                pr.full_name AS owner_name,
                COALESCE(pr.email, u.email) AS owner_email
            FROM public.tickets t
            JOIN public.users u
              ON u.id = t.user_id
            LEFT JOIN public.profiles pr
              ON pr.user_id = t.user_id
            WHERE true
              {scope_sql}
            ORDER BY t.created_at DESC
        """
        with self._read() as conn:
            rows = conn.execute(text(sql), scope_params).mappings().all()
        return [map_row_to_ticket_list_item(row) for row in rows]

    def close_ticket_with_response(self, *, ticket_id: str, admin_response: str, now: datetime):
        sql = f"""
            UPDATE public.tickets
            SET status = 'closed',
                admin_response = :admin_response,
                updated_at = :now
            WHERE id = CAST(:ticket_id AS uuid)
              AND status = 'open'
            RETURNING {_TICKET_COLUMNS}
        """
        with self._write() as conn:
            row = conn.execute(
                text(sql),
                {"ticket_id": ticket_id, "admin_response": admin_response, "now": now},
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_ticket(row)

    def count_open_tickets(self) -> int:
        sql = """
            SELECT COUNT(*)
            FROM public.tickets
            WHERE status = 'open'
        """
        with self._read() as conn:
            total = conn.execute(text(sql)).scalar_one()
        return int(total)
