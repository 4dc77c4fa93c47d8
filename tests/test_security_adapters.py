from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from portal.infrastructure.security.password_hasher import PasslibPasswordHasher
from portal.infrastructure.security.token_service import ACCESS_TOKEN_ALGORITHM, JwtTokenService


SECRET = "test-secret-with-enough-length-for-hs256"


def _service() -> JwtTokenService:
    return JwtTokenService(jwt_secret=SECRET, access_ttl_minutes=15, refresh_ttl_days=30)


def test_access_token_roundtrip():
    now = datetime.now(timezone.utc)
    issued = _service().issue_access_token(user_id="user-1", now=now)

    assert issued.expires_at == now + timedelta(minutes=15)
    assert _service().read_access_token(token=issued.value).user_id == "user-1"


def test_expired_access_token_is_rejected():
    issued = _service().issue_access_token(user_id="user-1", now=datetime.now(timezone.utc) - timedelta(hours=1))

    with pytest.raises(ValueError):
        _service().read_access_token(token=issued.value)


def test_token_from_other_issuer_or_type_is_rejected():
    now = datetime.now(timezone.utc)
    exp = int((now + timedelta(minutes=5)).timestamp())
    foreign = jwt.encode({"iss": "other", "sub": "user-1", "typ": "access", "exp": exp}, SECRET, algorithm=ACCESS_TOKEN_ALGORITHM)
    refresh_like = jwt.encode(
        {"iss": "vps-portal", "sub": "user-1", "typ": "refresh", "exp": exp},
        SECRET,
        algorithm=ACCESS_TOKEN_ALGORITHM,
    )

    with pytest.raises(ValueError):
        _service().read_access_token(token=foreign)
    with pytest.raises(ValueError):
        _service().read_access_token(token=refresh_like)
    with pytest.raises(ValueError):
        _service().read_access_token(token="not-a-jwt")


def test_refresh_tokens_are_opaque_and_digested():
    now = datetime.now(timezone.utc)
    service = _service()
    first = service.issue_refresh_token(now=now)
    second = service.issue_refresh_token(now=now)

    assert first.value != second.value
    assert first.expires_at == now + timedelta(days=30)
    digest = service.digest_refresh_token(refresh_token=first.value)
    assert len(digest) == 64
    assert digest == service.digest_refresh_token(refresh_token=first.value)


def test_password_hasher_uses_argon2_and_verifies():
    hasher = PasslibPasswordHasher()
    password_hash = hasher.hash("senha-forte")

    assert password_hash.startswith("$argon2")
    assert hasher.verify_and_update("senha-forte", password_hash) == (True, None)
    assert hasher.verify_and_update("errada", password_hash) == (False, None)


def test_password_hasher_treats_garbage_hash_as_mismatch():
    assert PasslibPasswordHasher().verify_and_update("senha", "not-a-hash") == (False, None)
