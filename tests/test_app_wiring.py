from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fakes import CUSTOMER, NOW, FakeAccountsPort, FakeTokenPort, make_profile
from portal.api import deps
from portal.application.use_cases.resolve_actor import ResolveActorUseCase
from portal.domain.entities.user import User
from portal.main import app, create_app


@pytest.fixture
def bare_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "")
    monkeypatch.setenv("POSTGRES_DSN", "")


def _accounts_with_customer() -> FakeAccountsPort:
    accounts = FakeAccountsPort()
    accounts.add_user(
        user=User(
            id=CUSTOMER.user_id,
            name=CUSTOMER.name,
            email=CUSTOMER.email,
            is_active=True,
            created_at=NOW,
            updated_at=NOW,
        ),
        password_hash="hashed::senha-forte",
    )
    accounts.add_profile(profile=make_profile(CUSTOMER))
    return accounts


def test_app_registers_every_router_without_overrides():
    paths = {route.path for route in create_app().routes}

    for path in (
        "/health",
        "/v1/auth/login",
        "/v1/me",
        "/v1/plans",
        "/v1/orders",
        "/v1/admin/overview",
        "/v1/navigation/checkout-entry",
    ):
        assert path in paths
    assert TestClient(app).get("/health").json() == {"status": "ok"}


def test_anonymous_navigation_works_without_jwt_secret(bare_env):
    response = TestClient(app).get("/v1/navigation/checkout-entry", params={"planId": "plan-1"})

    assert response.status_code == 200
    assert response.json()["requires_auth"] is True


def test_protected_route_still_reports_missing_secret(bare_env):
    response = TestClient(app).get("/v1/me", headers={"Authorization": "Bearer access-user-1"})

    assert response.status_code == 500


@pytest.mark.parametrize("header", ["Bearer stale-token", "Bearer access-ghost", "Basic abc"])
def test_invalid_token_on_navigation_counts_as_anonymous(monkeypatch, header):
    monkeypatch.setattr(deps, "get_token_service", FakeTokenPort)
    monkeypatch.setattr(deps, "get_resolve_actor_use_case", lambda: ResolveActorUseCase(accounts=FakeAccountsPort()))

    response = TestClient(app).get("/v1/navigation/guards/dashboard", headers={"Authorization": header})

    assert response.status_code == 200
    assert response.json() == {"allowed": False, "redirect_to": "/auth"}


def test_valid_token_on_navigation_resolves_actor(monkeypatch):
    accounts = _accounts_with_customer()
    monkeypatch.setattr(deps, "get_token_service", FakeTokenPort)
    monkeypatch.setattr(deps, "get_resolve_actor_use_case", lambda: ResolveActorUseCase(accounts=accounts))

    response = TestClient(app).get(
        "/v1/navigation/guards/admin",
        headers={"Authorization": f"Bearer access-{CUSTOMER.user_id}"},
    )

    assert response.json() == {"allowed": False, "redirect_to": "/dashboard"}
