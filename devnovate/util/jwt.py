"""Encoding and decoding of identity tokens with PyJWT.

Tokens are HS256-signed by the identity provider with a shared secret and
carry `sub` (user UUID), `email`, `exp`, `iss` and `aud`.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, field_validator

from devnovate.config import AuthSettings

# Tolerated clock drift against the identity provider
CLOCK_SKEW_SECONDS = 5


class TokenPayload(BaseModel):
    """Verified claims.

    `sub` is the local user ID, so it must be a UUID; it is kept as its
    canonical string.
    """

    sub: str
    email: str
    exp: datetime

    @field_validator("sub")
    @classmethod
    def sub_is_uuid(cls, v: str) -> str:
        return str(UUID(v))


class JWTError(Exception):
    """Token could not be trusted."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a token for `user_id` that expires after the configured lifetime."""
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": issued,
        "exp": issued + timedelta(minutes=settings.jwt_expiry_minutes),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature, expiry, issuer and audience, then return the claims.

    Raises:
        JWTError: "Token has expired" or "Invalid token"
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            leeway=CLOCK_SKEW_SECONDS,
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError("Invalid token") from e
