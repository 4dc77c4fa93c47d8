from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timedelta

import jwt

from portal.application.dto.auth import AccessTokenPayload, IssuedToken
from portal.application.ports.credentials_port import TokenPort


ACCESS_TOKEN_ALGORITHM = "HS256"
ACCESS_TOKEN_ISSUER = "vps-portal"
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_BYTES = 48


class JwtTokenService(TokenPort):
    """Access tokens JWT curtos e refresh tokens opacos guardados so como SHA-256."""

    def __init__(
        self,
        *,
        jwt_secret: str,
        access_ttl_minutes: int,
        refresh_ttl_days: int,
    ):
        self._jwt_secret = jwt_secret
        self._access_ttl = timedelta(minutes=access_ttl_minutes)
        self._refresh_ttl = timedelta(days=refresh_ttl_days)

    def issue_access_token(self, *, user_id: str, now: datetime) -> IssuedToken:
        expires_at = now + self._access_ttl
        claims = {
            "iss": ACCESS_TOKEN_ISSUER,
            "sub": user_id,
            "typ": ACCESS_TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._jwt_secret, algorithm=ACCESS_TOKEN_ALGORITHM)
        return IssuedToken(value=token, expires_at=expires_at)

    def read_access_token(self, *, token: str) -> AccessTokenPayload:
        try:
            claims = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[ACCESS_TOKEN_ALGORITHM],
                issuer=ACCESS_TOKEN_ISSUER,
                options={"require": ["exp", "sub", "iss"]},
            )
        except jwt.PyJWTError as exc:
            raise ValueError("Invalid access token.") from exc

        if claims.get("typ") != ACCESS_TOKEN_TYPE:
            raise ValueError("Invalid token type.")
        subject = claims["sub"]
        if not isinstance(subject, str) or not subject:
            raise ValueError("Invalid token subject.")
        return AccessTokenPayload(user_id=subject)

    def issue_refresh_token(self, *, now: datetime) -> IssuedToken:
        return IssuedToken(
            value=secrets.token_urlsafe(REFRESH_TOKEN_BYTES),
            expires_at=now + self._refresh_ttl,
        )

    def digest_refresh_token(self, *, refresh_token: str) -> str:
        return hashlib.sha256(refresh_token.encode("utf-8")).hexdigest()
