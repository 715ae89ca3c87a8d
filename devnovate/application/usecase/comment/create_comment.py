"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.model import Comment
from devnovate.domain.service import CommentService
from devnovate.domain.value import BlogId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str
    author_id: str  # From authenticated user
    content: str  # Trimmed and checked by the domain service


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    blog_id: str
    author_id: str
    author_display_name: str
    author_email: str
    content: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CreateCommentResponse":
        """Flatten a comment and its author snapshot."""
        return cls(
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            author_id=str(comment.author_id),
            author_display_name=comment.author.display_name,
            author_email=comment.author.email,
            content=comment.content,
            created_at=comment.created_at,
        )


class CreateCommentUseCase:
    """Use case for commenting on a blog."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            ValidationError: If the content is blank or too long
            NotFoundError: If the blog or the commenter's profile doesn't exist
        """
        comment = await self.comment_service.create_comment(
            blog_id=BlogId(UUID(request.blog_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )

        return CreateCommentResponse.from_comment(comment)
