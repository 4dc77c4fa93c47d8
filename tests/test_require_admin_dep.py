from __future__ import annotations

import pytest
from fastapi import HTTPException

from fakes import ADMIN, CUSTOMER, FakeTokenPort
from portal.api.deps import _resolve_actor, require_admin
from portal.application.dto.auth import AccessTokenPayload
from portal.domain.entities.actor import Actor
from portal.domain.exceptions import InvalidCredentialsError, UserInactiveError


class FakeResolveActorUseCase:
    def __init__(self, *, error: Exception | None = None):
        self._error = error

    def execute(self, payload: AccessTokenPayload) -> Actor:
        if self._error is not None:
            raise self._error
        return Actor(user_id=payload.user_id, email="alice@example.com", name="Alice")


def test_require_admin_blocks_customers():
    with pytest.raises(HTTPException) as exc_info:
        require_admin(actor=CUSTOMER)

    assert exc_info.value.status_code == 403


def test_require_admin_allows_admins():
    assert require_admin(actor=ADMIN) is ADMIN


def test_resolve_actor_reads_bearer_token():
    actor = _resolve_actor("Bearer access-user-1", FakeTokenPort(), FakeResolveActorUseCase())

    assert actor.user_id == "user-1"


@pytest.mark.parametrize("header", ["Token abc", "Bearer ", "Bearer not-a-token"])
def test_resolve_actor_rejects_bad_headers(header):
    with pytest.raises(HTTPException) as exc_info:
        _resolve_actor(header, FakeTokenPort(), FakeResolveActorUseCase())

    assert exc_info.value.status_code == 401


def test_resolve_actor_maps_domain_errors():
    with pytest.raises(HTTPException) as unknown:
        _resolve_actor(
            "Bearer access-ghost",
            FakeTokenPort(),
            FakeResolveActorUseCase(error=InvalidCredentialsError("User not found.")),
        )
    with pytest.raises(HTTPException) as inactive:
        _resolve_actor(
            "Bearer access-user-1",
            FakeTokenPort(),
            FakeResolveActorUseCase(error=UserInactiveError("User is inactive.")),
        )

    assert unknown.value.status_code == 401
    assert inactive.value.status_code == 403
