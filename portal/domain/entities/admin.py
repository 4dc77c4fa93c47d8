from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminCounters:
    users: int
    vps: int
    orders_pending: int
    orders_paid: int
    orders_cancelled: int
    tickets_open: int
