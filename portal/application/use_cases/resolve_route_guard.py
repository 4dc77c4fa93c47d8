from __future__ import annotations

from portal.application.dto.navigation import RouteGuardInput, RouteGuardOutput
from portal.domain.entities.actor import Actor
from portal.domain.services.navigation import guard_admin_console, guard_dashboard


_GUARDS = {
    "dashboard": guard_dashboard,
    "admin": guard_admin_console,
}


class ResolveRouteGuardUseCase:
    def execute(self, *, actor: Actor | None, command: RouteGuardInput) -> RouteGuardOutput:
        guard = _GUARDS.get(command.page)
        if guard is None:
            raise ValueError(f"Unknown page: {command.page}.")
        redirect_to = guard(
            authenticated=actor is not None,
            is_admin=bool(actor is not None and actor.is_admin),
        )
        return RouteGuardOutput(allowed=redirect_to is None, redirect_to=redirect_to)
