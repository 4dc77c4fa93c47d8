from __future__ import annotations

from portal.domain.entities.actor import Actor
from portal.domain.exceptions import AdminRequiredError


def ensure_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise AdminRequiredError("Administrator access is required.")


def owner_scope(actor: Actor) -> str | None:
    """`user_id` que filtra as consultas do ator; None libera todas as linhas."""
    if actor.is_admin:
        return None
    return actor.user_id
