# Overview: Service-layer operations for bearer tokens; stateless JWT issue/validate.

"""
Bearer Token Service

Tokens are HS256 JWTs carrying {role, iat, exp}. Nothing is persisted:
any holder of the shared secret can verify a token offline, and there is
no revocation list, so a leaked token stays valid until it expires.

Every validation failure (bad signature, malformed token, expired token,
missing or unknown role) surfaces as the same InvalidTokenError message so
callers cannot tell the reasons apart.
"""

from datetime import datetime, timedelta, timezone

import jwt

from ..permissions import Role


ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(hours=24)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class InvalidTokenError(Exception):
    """Raised for any token that must not authenticate a request."""

    def __init__(self, message: str = INVALID_TOKEN_MESSAGE):
        super().__init__(message)


def issue_token(role: str, secret: str, ttl: timedelta | None = None) -> str:
    """
    Issue a signed token for role.

    Raises ValueError if the secret is empty or the role is unknown; there
    is no other failure mode.
    """
    if not secret:
        raise ValueError("Token signing secret is not configured")
    if role not in Role.ALL:
        raise ValueError(f"Unknown role: {role}")

    now = datetime.now(timezone.utc)
    payload = {
        "role": role,
        "iat": now,
        "exp": now + (ttl or DEFAULT_TOKEN_TTL),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_token(token: str, secret: str) -> str:
    """Return the role carried by token or raise InvalidTokenError."""
    if not token or not secret:
        raise InvalidTokenError()

    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "iat", "role"]},
        )
    except jwt.PyJWTError as exc:
        # ExpiredSignatureError, InvalidSignatureError and DecodeError all land here
        raise InvalidTokenError() from exc

    role = claims.get("role")
    if role not in Role.ALL:
        raise InvalidTokenError()

    return role
