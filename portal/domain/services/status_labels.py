from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


Emphasis = Literal["default", "secondary", "destructive"]


@dataclass(frozen=True)
class StatusPresentation:
    label: str
    emphasis: Emphasis


STATUS_PRESENTATIONS: dict[str, StatusPresentation] = {
    "active": StatusPresentation(label="Ativo", emphasis="default"),
    "pending": StatusPresentation(label="Pendente", emphasis="secondary"),
    "suspended": StatusPresentation(label="Suspenso", emphasis="destructive"),
    "paid": StatusPresentation(label="Pago", emphasis="default"),
    "cancelled": StatusPresentation(label="Cancelado", emphasis="destructive"),
    "open": StatusPresentation(label="Aberto", emphasis="default"),
    "closed": StatusPresentation(label="Fechado", emphasis="secondary"),
}


def present_status(status: str | None) -> StatusPresentation:
    # Status desconhecido cai na apresentacao de "pending", nunca em erro.
    if status is None:
        return STATUS_PRESENTATIONS["pending"]
    return STATUS_PRESENTATIONS.get(status, STATUS_PRESENTATIONS["pending"])


PRIORITY_LABELS: dict[str, str] = {
    "low": "Baixa",
    "medium": "Média",
    "high": "Alta",
}

PRIORITY_COLORS: dict[str, str] = {
    "low": "#16a34a",
    "medium": "#f59e0b",
    "high": "#dc2626",
}


def priority_label(priority: str | None) -> str:
    return PRIORITY_LABELS.get(priority or "", PRIORITY_LABELS["medium"])


def priority_color(priority: str | None) -> str:
    if priority == "high":
        return PRIORITY_COLORS["high"]
    if priority == "medium":
        return PRIORITY_COLORS["medium"]
    return PRIORITY_COLORS["low"]
