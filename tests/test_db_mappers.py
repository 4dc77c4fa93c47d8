from __future__ import annotations

import unittest
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from portal.infrastructure.db.mappers.accounts_mapper import map_row_to_profile
from portal.infrastructure.db.mappers.catalog_mapper import map_row_to_plan
from portal.infrastructure.db.mappers.orders_mapper import map_row_to_order_list_item, map_row_to_vps
from portal.infrastructure.db.mappers.tickets_mapper import map_row_to_ticket_list_item


CREATED_AT = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)
USER_ID = UUID("5b1f0d0e-6a37-4c1a-9d0f-1f2a3b4c5d6e")
PLAN_ID = UUID("0c9d8e7f-1111-4a2b-8c3d-4e5f6a7b8c9d")


class PortalMapperTests(unittest.TestCase):
    def test_map_row_to_plan_reads_features_from_json_text(self):
        row = {
            "id": PLAN_ID,
            "name": "VPS Starter",
            "price": "25.90",
            "ram": "1GB",
            "cpu": "2 vCores",
            "storage": "60GB SSD",
            "features": '["1GB RAM DDR4", "Suporte 24/7"]',
            "is_active": True,
            "is_popular": False,
            "created_at": CREATED_AT,
        }

        plan = map_row_to_plan(row)

        self.assertEqual(plan.id, str(PLAN_ID))
        self.assertEqual(plan.price, Decimal("25.90"))
        self.assertEqual(plan.features, ("1GB RAM DDR4", "Suporte 24/7"))

    def test_map_row_to_plan_accepts_features_list_and_null(self):
        row = {
            "id": "plan-1",
            "name": "VPS Pro",
            "price": Decimal("47.50"),
            "ram": "2GB",
            "cpu": "3 vCores",
            "storage": "120GB SSD",
            "features": ["IPv4 dedicado"],
            "is_active": True,
            "is_popular": True,
            "created_at": CREATED_AT,
        }

        self.assertEqual(map_row_to_plan(row).features, ("IPv4 dedicado",))
        self.assertEqual(map_row_to_plan({**row, "features": None}).features, ())

    def test_map_row_to_order_list_item_includes_plan_and_owner(self):
        row = {
            "id": UUID("aaaaaaaa-0000-4000-8000-000000000001"),
            "user_id": USER_ID,
            "plan_id": PLAN_ID,
            "amount": Decimal("25.90"),
            "status": "pending",
            "payment_method": "pix",
            "pix_code": "pix@vyntracloud.com",
            "vps_id": None,
            "created_at": CREATED_AT,
            "updated_at": CREATED_AT,
            "plan_name": "VPS Starter",
            "plan_ram": "1GB",
            "plan_cpu": "2 vCores",
            "plan_storage": "60GB SSD",
            "plan_price": Decimal("29.90"),
            "owner_name": "Alice",
            "owner_email": "alice@example.com",
        }

        item = map_row_to_order_list_item(row)

        self.assertEqual(item.order.user_id, str(USER_ID))
        self.assertEqual(item.order.amount, Decimal("25.90"))
        self.assertIsNone(item.order.vps_id)
        self.assertEqual(item.plan_price, Decimal("29.90"))
        self.assertEqual(item.owner_email, "alice@example.com")

    def test_map_row_to_vps_stringifies_ids(self):
        vps_id = UUID("bbbbbbbb-0000-4000-8000-000000000002")
        row = {
            "id": vps_id,
            "user_id": USER_ID,
            "plan_id": PLAN_ID,
            "name": "VPS Starter - Alice",
            "status": "active",
            "ip_address": "192.168.10.20",
            "control_panel_url": "https://panel",
            "remote_access_url": None,
            "created_at": CREATED_AT,
            "updated_at": CREATED_AT,
        }

        vps = map_row_to_vps(row)

        self.assertEqual(vps.id, str(vps_id))
        self.assertEqual(vps.ip_address, "192.168.10.20")
        self.assertIsNone(vps.remote_access_url)

    def test_map_row_to_ticket_list_item(self):
        row = {
            "id": "ticket-1",
            "user_id": USER_ID,
            "title": "Ajuda",
            "message": "Preciso de ajuda",
            "priority": "low",
            "status": "closed",
            "admin_response": "Resolvido",
            "created_at": CREATED_AT,
            "updated_at": CREATED_AT,
            "owner_name": None,
            "owner_email": "alice@example.com",
        }

        item = map_row_to_ticket_list_item(row)

        self.assertEqual(item.ticket.status, "closed")
        self.assertEqual(item.ticket.admin_response, "Resolvido")
        self.assertIsNone(item.owner_name)

    def test_map_row_to_profile_reads_admin_flag(self):
        row = {
            "id": "profile-1",
            "user_id": USER_ID,
            "email": "ops@example.com",
            "full_name": "Ops",
            "phone": None,
            "is_admin": 1,
            "created_at": CREATED_AT,
            "updated_at": CREATED_AT,
        }

        profile = map_row_to_profile(row)

        self.assertTrue(profile.is_admin)
        self.assertEqual(profile.user_id, str(USER_ID))


if __name__ == "__main__":
    unittest.main()
