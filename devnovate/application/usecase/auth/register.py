"""Register use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from devnovate.domain.service import NotificationService, UserService
from devnovate.domain.value import UserId

from .get_current_user import GetCurrentUserResponse


class RegisterRequest(BaseModel):
    """Register request.

    Both fields come from a verified token, never from the request body.
    """

    user_id: str
    email: str


class RegisterResponse(BaseModel):
    """Register response."""

    user: GetCurrentUserResponse
    created: bool


class RegisterUseCase:
    """Use case for creating the local profile of a verified identity."""

    def __init__(
        self, user_service: UserService, notification_service: NotificationService
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register the user, or return the existing profile.

        A welcome notification is sent only on first registration.
        """
        with logfire.span("register.execute", user_id=request.user_id):
            user, created = await self.user_service.register(
                UserId(UUID(request.user_id)), request.email
            )

            if created:
                await self.notification_service.schedule_user_registered(user)

            return RegisterResponse(
                user=GetCurrentUserResponse(
                    user_id=str(user.id),
                    email=user.email,
                    display_name=user.display_name,
                    bio=user.bio,
                    avatar_url=user.avatar_url,
                    role=user.role,
                    created_at=user.created_at,
                ),
                created=created,
            )
