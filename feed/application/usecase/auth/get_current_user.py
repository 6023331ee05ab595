"""Get current user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.domain.service import JWTService
from feed.domain.value import UserId
from feed.util.jwt import InvalidCredentialError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Identity of the authenticated caller, taken from verified claims."""

    user_id: str
    name: str
    avatar: str | None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the caller behind a credential.

    The profile store is not consulted; the verified claims are the
    caller's identity for the duration of the request.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token and return the caller.

        Raises:
            InvalidCredentialError: If the token is invalid or expired, or
                its user id is not a valid user id
        """
        claims = self.jwt_service.verify_token(request.token)
        try:
            user_id = UserId(UUID(claims.user_id))
        except ValueError:
            logfire.warn("Token carries an invalid user id", user_id=claims.user_id)
            raise InvalidCredentialError("Invalid token")

        return GetCurrentUserResponse(
            user_id=str(user_id),
            name=claims.name,
            avatar=claims.avatar,
        )
