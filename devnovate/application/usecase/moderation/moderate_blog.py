"""Moderate blog use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devnovate.application.usecase.blog.models import BlogSummary
from devnovate.domain.service import ModerationService
from devnovate.domain.value import Actor, BlogId, ModerationAction, UserId, UserRole


class ModerateBlogRequest(BaseModel):
    """Moderate blog request.

    `submit` comes from the author; every other action from a moderator.
    """

    blog_id: str
    action: ModerationAction
    actor_id: str
    actor_role: UserRole = UserRole.USER
    reason: str | None = Field(default=None, max_length=1000)  # Reject only


class ModerateBlogResponse(BaseModel):
    """Moderate blog response."""

    blog: BlogSummary
    action: ModerationAction


class ModerateBlogUseCase:
    """Use case for moving a blog through the moderation workflow."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate blog use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateBlogRequest) -> ModerateBlogResponse:
        """Execute moderation flow.

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor lacks authority for the action
            InvalidTransitionError: If the action isn't valid from the current status
            ConflictError: If the blog changed concurrently
        """
        blog = await self.moderation_service.apply(
            BlogId(UUID(request.blog_id)),
            request.action,
            Actor(user_id=UserId(UUID(request.actor_id)), role=request.actor_role),
            reason=request.reason,
        )
        return ModerateBlogResponse(
            blog=BlogSummary.from_blog(blog), action=request.action
        )
