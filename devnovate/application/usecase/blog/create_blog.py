"""Create blog use case."""

from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from devnovate.domain.error import ValidationError
from devnovate.domain.service import BlogService
from devnovate.domain.value import BlogStatus, Tag, UserId

from .models import BlogDetail


class CreateBlogRequest(BaseModel):
    """Create blog request."""

    author_id: str  # From authenticated user
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list, max_length=10)
    status: BlogStatus = BlogStatus.PENDING


class CreateBlogUseCase:
    """Use case for writing a new blog."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: CreateBlogRequest) -> BlogDetail:
        """Create a blog in draft or pending.

        Raises:
            ValidationError: If a tag is malformed or the status isn't draft/pending
        """
        try:
            tags = [Tag(t) for t in request.tags]
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid tag: {e.errors()[0]['msg']}") from e

        blog = await self.blog_service.create_blog(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=tags,
            status=request.status,
        )
        return BlogDetail.from_blog(blog)
