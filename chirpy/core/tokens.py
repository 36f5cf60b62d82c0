"""Bearer-token helpers (issue and validate HS256 JWTs)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from .config import get_settings

ALGORITHM = "HS256"
BEARER_PREFIX = "bearer "


class TokenError(Exception):
    """Raised when a token is missing, malformed, expired or forged."""


def resolve_ttl(expires_in_seconds: int | None, default_ttl: int) -> int:
    """Clients may shorten the lifetime, never extend it past the default."""
    if expires_in_seconds and 0 < expires_in_seconds <= default_ttl:
        return expires_in_seconds
    return default_ttl


def issue_token(user_id: int, expires_in_seconds: int | None = None) -> str:
    settings = get_settings()
    if not settings.jwt_secret:
        raise TokenError("JWT_SECRET is not configured")
    now = datetime.now(timezone.utc)
    ttl = resolve_ttl(expires_in_seconds, settings.token_ttl_seconds)
    claims = {
        "iss": settings.jwt_issuer,
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
        "sub": str(user_id),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str) -> int:
    """Return the user id carried by ``token``."""
    settings = get_settings()
    if not settings.jwt_secret:
        raise TokenError("JWT_SECRET is not configured")
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[ALGORITHM],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as exc:
        raise TokenError(str(exc)) from exc
    try:
        return int(claims["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenError("Token subject is not a user id") from exc


def bearer_from_header(value: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    header = (value or "").strip()
    if not header.lower().startswith(BEARER_PREFIX):
        raise TokenError("Missing bearer token")
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise TokenError("Missing bearer token")
    return token
