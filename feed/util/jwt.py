"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, ValidationError

from feed.config import AuthSettings


class SessionClaims(BaseModel):
    """Decoded credential payload.

    ``exp`` is the expiry as epoch seconds, as carried in the token.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    name: str
    avatar: str | None = None
    exp: float

    def is_expired(self, now: float) -> bool:
        """Whether the claims expired at or before ``now`` (epoch seconds)."""
        return self.exp <= now


class InvalidCredentialError(Exception):
    """Credential could not be decoded or verified."""

    pass


def create_token(
    user_id: str,
    name: str,
    avatar: str | None,
    settings: AuthSettings,
) -> str:
    """Create a JWT token for the user.

    Issuance normally happens in the identity service; this mirrors its
    payload so the server and client can be exercised locally.

    Args:
        user_id: User ID
        name: Display name
        avatar: Avatar reference
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(seconds=settings.jwt_expiry_seconds)

    payload = {
        "user_id": user_id,
        "name": name,
        "avatar": avatar,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> SessionClaims:
    """Verify signature and expiry, then decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Decoded claims

    Raises:
        InvalidCredentialError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return SessionClaims(**payload)
    except jwt.ExpiredSignatureError:
        raise InvalidCredentialError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise InvalidCredentialError("Invalid token")


def decode_claims(token: str) -> SessionClaims:
    """Decode a JWT token without verifying it.

    Pure and local: the signature is not checked and an expired token
    still decodes. Used by the client to read who is logged in; the
    server verifies the token on every request.

    Args:
        token: JWT token to decode

    Returns:
        Decoded claims

    Raises:
        InvalidCredentialError: If the token is malformed or lacks claims
    """
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
        return SessionClaims(**payload)
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise InvalidCredentialError("Malformed token") from e
