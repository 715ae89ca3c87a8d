"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.error import NotFoundError
from devnovate.domain.service import JWTService, UserService
from devnovate.domain.value import UserId, UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    display_name: str
    bio: str | None
    avatar_url: str | None
    role: UserRole
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the local profile for the token subject
        3. Return profile including role

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and the user is registered

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user hasn't registered
        """
        payload = self.jwt_service.verify_token(request.token)

        user = await self.user_service.get_user_by_id(UserId(UUID(payload.sub)))
        if not user:
            raise NotFoundError("User", payload.sub)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role,
            created_at=user.created_at,
        )
