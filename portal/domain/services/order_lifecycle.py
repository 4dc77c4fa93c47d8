from __future__ import annotations

from portal.domain.exceptions import OrderTransitionError


ORDER_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"paid", "cancelled"}),
    "paid": frozenset(),
    "cancelled": frozenset(),
}


def can_transition_order(current: str, target: str) -> bool:
    return target in ORDER_TRANSITIONS.get(current, frozenset())


def ensure_order_transition(*, order_id: str, current: str, target: str) -> None:
    if not can_transition_order(current, target):
        raise OrderTransitionError(
            f"Order {order_id} cannot move from '{current}' to '{target}'."
        )
