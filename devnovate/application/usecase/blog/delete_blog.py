"""Delete blog use case."""

from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.service import BlogService
from devnovate.domain.value import Actor, BlogId, UserId, UserRole


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: str
    actor_id: str
    actor_role: UserRole = UserRole.USER


class DeleteBlogResponse(BaseModel):
    """Delete blog response."""

    success: bool


class DeleteBlogUseCase:
    """Use case for deleting a blog (author or moderator)."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize delete blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: DeleteBlogRequest) -> DeleteBlogResponse:
        """Execute delete blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor is neither author nor moderator
        """
        await self.blog_service.delete_blog(
            BlogId(UUID(request.blog_id)),
            Actor(user_id=UserId(UUID(request.actor_id)), role=request.actor_role),
        )
        return DeleteBlogResponse(success=True)
