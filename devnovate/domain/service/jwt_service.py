"""Identity token service."""

import logfire

from devnovate.config import AuthSettings
from devnovate.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Verifies the identity tokens issued by the external identity provider.

    The token subject is the user's UUID and is trusted as the local user
    ID once the signature, issuer, audience and expiry check out.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str) -> str:
        """Mint a token locally, as the identity provider would (dev and tests)."""
        return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", reason=str(e))
                raise
            logfire.debug("Token verified", user_id=payload.sub)
            return payload

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Token subject, or None when the token is absent or unusable.

        Anonymous readers and readers with a stale cookie are treated alike.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).sub
        except JWTError:
            return None
