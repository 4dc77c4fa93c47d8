from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetPlanInput:
    plan_id: str
