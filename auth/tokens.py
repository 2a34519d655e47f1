"""Signed access tokens.

Tokens are HS256 JWTs carrying ``sub`` (the user id as a string), ``email``,
``is_admin``, ``iat`` and ``exp``. They are never stored server side; a token
stays valid until its expiry.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Protocol

import jwt

from utils.errors import AuthorizationError, ConfigurationError, SigningError

DEFAULT_TOKEN_LIFETIME = timedelta(days=7)
REQUIRED_CLAIMS = ("sub", "email", "iat", "exp")


class GateOutcome(enum.Enum):
    """Terminal states of a request passing through the auth gate."""

    NO_TOKEN = "no_token"
    MALFORMED = "malformed"
    SIGNATURE_INVALID = "signature_invalid"
    EXPIRED = "expired"
    SUBJECT_NOT_FOUND = "subject_not_found"
    AUTHORIZED = "authorized"


class UserSnapshot(Protocol):
    id: Any
    email: str
    is_admin: bool


@dataclass(frozen=True)
class TokenSettings:
    """Signing configuration, loaded once at startup."""

    secret: str
    algorithm: str = "HS256"
    lifetime: timedelta = DEFAULT_TOKEN_LIFETIME

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "TokenSettings":
        secret = config.get("JWT_SECRET_KEY")
        if not secret or not str(secret).strip():
            raise ConfigurationError("JWT_SECRET_KEY must be set to sign access tokens.")
        return cls(
            secret=str(secret),
            algorithm=config.get("JWT_ALGORITHM") or "HS256",
            lifetime=config.get("JWT_ACCESS_TOKEN_EXPIRES") or DEFAULT_TOKEN_LIFETIME,
        )


def issue_token(user: UserSnapshot, settings: TokenSettings, now: datetime | None = None) -> str:
    """Sign a token asserting the identity of an already persisted user."""

    if getattr(user, "id", None) is None or not getattr(user, "email", None):
        raise ValueError("Tokens can only be issued for persisted users.")
    if settings is None or not settings.secret:
        raise SigningError("Token signing secret is not configured.")

    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "is_admin": bool(user.is_admin),
        "iat": issued_at,
        "exp": issued_at + settings.lifetime,
    }
    try:
        return jwt.encode(claims, settings.secret, algorithm=settings.algorithm)
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
        raise SigningError(f"Token signing failed: {exc}", original_exception=exc) from exc


def verify_token(token: str, settings: TokenSettings) -> dict:
    """Return the claims of a valid token or raise ``AuthorizationError``."""

    if not token:
        raise AuthorizationError(GateOutcome.MALFORMED)
    try:
        return jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthorizationError(GateOutcome.EXPIRED) from exc
    except jwt.InvalidSignatureError as exc:
        raise AuthorizationError(GateOutcome.SIGNATURE_INVALID) from exc
    except jwt.InvalidTokenError as exc:
        raise AuthorizationError(GateOutcome.MALFORMED) from exc


def extract_bearer(header_value: str) -> str:
    """Strip the ``Bearer`` scheme and surrounding whitespace from a header."""

    value = header_value.strip()
    if value[:6].lower() == "bearer":
        value = value[6:]
    return value.strip()
