from __future__ import annotations

from portal.application.dto.navigation import CheckoutEntryInput, NavigationOutput
from portal.domain.entities.actor import Actor
from portal.domain.services.navigation import resolve_checkout_entry


class ResolveCheckoutEntryUseCase:
    def execute(self, *, actor: Actor | None, command: CheckoutEntryInput) -> NavigationOutput:
        authenticated = actor is not None
        return NavigationOutput(
            redirect_to=resolve_checkout_entry(plan_id=command.plan_id, authenticated=authenticated),
            requires_auth=not authenticated,
        )
