from __future__ import annotations

import json
import logging
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import text

from portal.domain.entities.settings import PAYMENT_SETTING_KEYS


logger = logging.getLogger(__name__)

DEFAULT_PLANS: tuple[dict, ...] = (
    {
        "name": "VPS Starter",
        "price": Decimal("25.90"),
        "ram": "1GB",
        "cpu": "2 vCores",
        "storage": "60GB SSD",
        "is_popular": False,
        "features": [
            "1GB RAM DDR4",
            "60GB SSD NVMe",
            "Dual Xeon 5520 Custom",
            "Internet ilimitada",
            "IP dedicado",
            "Painel de controle",
            "Garantia 7 dias",
            "Suporte 24/7",
        ],
    },
    {
        "name": "VPS Professional",
        "price": Decimal("47.50"),
        "ram": "4GB",
        "cpu": "4 vCores",
        "storage": "60GB SSD",
        "is_popular": True,
        "features": [
            "4GB RAM DDR4",
            "60GB SSD NVMe",
            "Dual Xeon 5520 Custom",
            "Internet ilimitada",
            "IP dedicado",
            "Painel de controle",
            "Garantia 7 dias",
            "Suporte prioritário 24/7",
            "Backup automático",
        ],
    },
    {
        "name": "VPS Enterprise",
        "price": Decimal("82.50"),
        "ram": "8GB",
        "cpu": "6 vCores",
        "storage": "60GB SSD",
        "is_popular": False,
        "features": [
            "8GB RAM DDR4",
            "60GB SSD NVMe",
            "Dual Xeon 5520 Custom",
            "Internet ilimitada",
            "IP dedicado",
            "Painel de controle avançado",
            "Garantia 7 dias",
            "Suporte VIP 24/7",
            "Backup automático diário",
            "Monitoramento avançado",
        ],
    },
)


def seed_portal_defaults(engine) -> None:
    with engine.begin() as conn:
        for plan in DEFAULT_PLANS:
            conn.execute(
                text(
                    """
                    INSERT INTO public.plans (id, name, price, ram, cpu, storage, features, is_active, is_popular)
                    VALUES (:id, :name, :price, :ram, :cpu, :storage, CAST(:features AS jsonb), true, :is_popular)
                    ON CONFLICT (name) DO UPDATE
                    SET ram = EXCLUDED.ram,
                        cpu = EXCLUDED.cpu,
                        storage = EXCLUDED.storage,
                        features = EXCLUDED.features,
                        is_popular = EXCLUDED.is_popular
                    """
                ),
                {
                    "id": str(uuid4()),
                    "name": plan["name"],
                    "price": plan["price"],
                    "ram": plan["ram"],
                    "cpu": plan["cpu"],
                    "storage": plan["storage"],
                    "features": json.dumps(plan["features"], ensure_ascii=False),
                    "is_popular": plan["is_popular"],
                },
            )

        # Configuracoes de pagamento ficam vazias ate o admin preencher.
        for key in PAYMENT_SETTING_KEYS:
            conn.execute(
                text(
                    """
                    INSERT INTO public.settings (id, key, value)
                    VALUES (:id, :key, '')
                    ON CONFLICT (key) DO NOTHING
                    """
                ),
                {"id": str(uuid4()), "key": key},
            )
    logger.info("seed_portal_defaults: done plans=%s", len(DEFAULT_PLANS))
