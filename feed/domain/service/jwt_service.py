"""JWT token domain service."""

import logfire

from feed.config import AuthSettings
from feed.util.jwt import InvalidCredentialError, SessionClaims, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> SessionClaims:
        """Verify JWT token and extract claims.

        Args:
            token: JWT token string

        Returns:
            Verified claims

        Raises:
            InvalidCredentialError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                claims = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=claims.user_id)
                return claims
            except InvalidCredentialError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
