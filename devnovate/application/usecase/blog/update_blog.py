"""Update blog use case."""

from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from devnovate.domain.error import ValidationError
from devnovate.domain.service import BlogService
from devnovate.domain.value import Actor, BlogId, Tag, UserId, UserRole

from .models import BlogDetail


class UpdateBlogRequest(BaseModel):
    """Update blog request.

    Omitted fields are left unchanged. There is no status field: status
    only changes through moderation actions.
    """

    blog_id: str
    actor_id: str
    actor_role: UserRole = UserRole.USER
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    excerpt: str | None = None
    tags: list[str] | None = Field(default=None, max_length=10)


class UpdateBlogUseCase:
    """Use case for the author editing their blog."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize update blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: UpdateBlogRequest) -> BlogDetail:
        """Execute update blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor isn't the author
            ValidationError: If a tag is malformed
        """
        tags = None
        if request.tags is not None:
            try:
                tags = [Tag(t) for t in request.tags]
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid tag: {e.errors()[0]['msg']}") from e

        blog = await self.blog_service.update_content(
            BlogId(UUID(request.blog_id)),
            Actor(user_id=UserId(UUID(request.actor_id)), role=request.actor_role),
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=tags,
        )
        return BlogDetail.from_blog(blog)
