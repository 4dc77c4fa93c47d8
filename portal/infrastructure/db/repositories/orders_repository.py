from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import text

from portal.application.ports.orders_port import OrdersPort
from portal.domain.entities.actor import Actor
from portal.domain.entities.vps import VpsProvisioning
from portal.domain.services.access import owner_scope
from portal.infrastructure.db.mappers.orders_mapper import (
    map_row_to_order,
    map_row_to_order_list_item,
    map_row_to_vps,
)

from .base import SqlRepository, owner_filter


logger = logging.getLogger(__name__)

_ORDER_COLUMNS = "id, user_id, plan_id, amount, status, payment_method, pix_code, vps_id, created_at, updated_at"

_ORDER_LIST_SELECT = """
    SELECT
        o.id,
        o.user_id,
        o.plan_id,
        o.amount,
        o.status,
        o.payment_method,
        o.pix_code,
        o.vps_id,
        o.created_at,
        o.updated_at,
        p.name AS plan_name,
        p.ram AS plan_ram,
        p.cpu AS plan_cpu,
        p.storage AS plan_storage,
        p.price AS plan_price,
        pr.full_name AS owner_name,
        COALESCE(pr.email, u.email) AS owner_email
    FROM public.orders o
    JOIN public.plans p
      ON p.id = o.plan_id
    JOIN public.users u
      ON u.id = o.user_id
    LEFT JOIN public.profiles pr
      ON pr.user_id = o.user_id
"""


class SqlOrdersRepository(SqlRepository, OrdersPort):
    def create_order(
        self,
        *,
        order_id: str,
        user_id: str,
        plan_id: str,
        amount: Decimal,
        payment_method: str | None,
        pix_code: str | None,
        now: datetime,
    ):
        sql = f"""
            INSERT INTO public.orders (
                id, user_id, plan_id, amount, status, payment_method, pix_code, vps_id, created_at, updated_at
            ) VALUES (
                :id, :user_id, :plan_id, :amount, 'pending', :payment_method, :pix_code, NULL, :now, :now
            )
            RETURNING {_ORDER_COLUMNS}
        """
        params = {
            "id": order_id,
            "user_id": user_id,
            "plan_id": plan_id,
            "amount": amount,
            "payment_method": payment_method,
            "pix_code": pix_code,
            "now": now,
        }
        with self._write() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_order(row)

    def get_order(self, *, order_id: str, actor: Actor):
        scope_sql, scope_params = owner_filter("o.user_id", owner_scope(actor))
        sql = f"""
            {_ORDER_LIST_SELECT}
            WHERE o.id = CAST(:order_id AS uuid)
              {scope_sql}
            LIMIT 1
        """
        with self._read() as conn:
            row = conn.execute(text(sql), {"order_id": order_id, **scope_params}).mappings().first()
        if row is None:
            return None
        return map_row_to_order_list_item(row)

    def list_orders(self, *, actor: Actor):
        scope_sql, scope_params = owner_filter("o.user_id", owner_scope(actor))
        sql = f"""
            {_ORDER_LIST_SELECT}
            WHERE true
              {scope_sql}
            ORDER BY o.created_at DESC
        """
        with self._read() as conn:
            rows = conn.execute(text(sql), scope_params).mappings().all()
        return [map_row_to_order_list_item(row) for row in rows]

    def approve_and_provision(
        self,
        *,
        order_id: str,
        provisioning: VpsProvisioning,
        now: datetime,
    ):
        # O UPDATE condicional trava a linha; uma aprovacao concorrente espera
        # e depois nao encontra mais `pending`.
        claim_sql = """
            UPDATE public.orders
            SET status = 'paid',
                updated_at = :now
            WHERE id = CAST(:order_id AS uuid)
              AND status = 'pending'
            RETURNING user_id, plan_id
        """
        vps_sql = """
            INSERT INTO public.vps (
                id, user_id, plan_id, name, status, ip_address, control_panel_url, remote_access_url,
                created_at, updated_at
            ) VALUES (
                :id, :user_id, :plan_id, :name, :status, :ip_address, :control_panel_url, :remote_access_url,
                :now, :now
            )
            RETURNING id, user_id, plan_id, name, status, ip_address, control_panel_url, remote_access_url,
                      created_at, updated_at
        """
        link_sql = f"""
            UPDATE public.orders
            SET vps_id = :vps_id
            WHERE id = CAST(:order_id AS uuid)
            RETURNING {_ORDER_COLUMNS}
        """
        with self._write() as conn:
            claimed = conn.execute(text(claim_sql), {"order_id": order_id, "now": now}).mappings().first()
            if claimed is None:
                return None
            vps_row = conn.execute(
                text(vps_sql),
                {
                    "id": provisioning.vps_id,
                    "user_id": claimed["user_id"],
                    "plan_id": claimed["plan_id"],
                    "name": provisioning.name,
                    "status": provisioning.status,
                    "ip_address": provisioning.ip_address,
                    "control_panel_url": provisioning.control_panel_url,
                    "remote_access_url": provisioning.remote_access_url,
                    "now": now,
                },
            ).mappings().one()
            order_row = conn.execute(
                text(link_sql),
                {"vps_id": provisioning.vps_id, "order_id": order_id},
            ).mappings().one()
        logger.debug("orders_repository: provisioned order_id=%s vps_id=%s", order_id, provisioning.vps_id)
        return map_row_to_order(order_row), map_row_to_vps(vps_row)

    def transition_order_status(
        self,
        *,
        order_id: str,
        from_status: str,
        to_status: str,
        now: datetime,
    ):
        sql = f"""
            UPDATE public.orders
            SET status = :to_status,
                updated_at = :now
            WHERE id = CAST(:order_id AS uuid)
              AND status = :from_status
            RETURNING {_ORDER_COLUMNS}
        """
        with self._write() as conn:
            row = conn.execute(
                text(sql),
                {
                    "order_id": order_id,
                    "from_status": from_status,
                    "to_status": to_status,
                    "now": now,
                },
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_order(row)

    def count_orders_by_status(self) -> dict[str, int]:
        sql = """
            SELECT status, COUNT(*) AS total
            FROM public.orders
            GROUP BY status
        """
        with self._read() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return {row["status"]: int(row["total"]) for row in rows}
