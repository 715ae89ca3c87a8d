"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.service import BlogService, CommentService
from devnovate.domain.value import BlogId

from .create_comment import CreateCommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CreateCommentResponse]  # Newest first
    total: int


class GetCommentsUseCase:
    """Use case for listing comments on a blog."""

    def __init__(
        self, blog_service: BlogService, comment_service: CommentService
    ) -> None:
        """Initialize get comments use case.

        Args:
            blog_service: Blog domain service
            comment_service: Comment domain service
        """
        self.blog_service = blog_service
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """List comments, newest first.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        blog_id = BlogId(UUID(request.blog_id))
        await self.blog_service.require_blog(blog_id)

        comments = await self.comment_service.get_comments_for_blog(blog_id)
        return GetCommentsResponse(
            comments=[CreateCommentResponse.from_comment(c) for c in comments],
            total=len(comments),
        )
