"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from devnovate.domain.error import NotFoundError, ValidationError
from devnovate.domain.model.comment import Comment
from devnovate.domain.repository import CommentRepository
from devnovate.domain.value import BlogId, CommentId, UserId

from .base import Service
from .blog_service import BlogService
from .notification_service import NotificationService
from .user_service import UserService

MAX_COMMENT_LENGTH = 5000


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_service: BlogService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            blog_service: Blog domain service
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.blog_service = blog_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def create_comment(
        self, blog_id: BlogId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a blog.

        The commenter's display name and email are copied onto the comment;
        later profile changes don't rewrite it. The blog's comment counter
        is incremented together with the insert.

        Args:
            blog_id: Blog ID
            author_id: Commenting user ID
            content: Comment text (trimmed before saving)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is blank or too long
            NotFoundError: If the blog or the commenter's profile doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            blog_id=str(blog_id),
            author_id=str(author_id),
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Comment content is required")
            if len(text) > MAX_COMMENT_LENGTH:
                raise ValidationError(
                    f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
                )

            blog = await self.blog_service.require_blog(blog_id)

            author = await self.user_service.get_user_by_id(author_id)
            if not author:
                logfire.error("Commenter has no profile", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))

            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                author_id=author_id,
                author=author.snapshot(),
                content=text,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.add(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                blog_id=str(blog_id),
                author_id=str(author_id),
            )

            await self.notification_service.schedule_comment_added(blog, saved)
            return saved

    async def get_comments_for_blog(self, blog_id: BlogId) -> list[Comment]:
        """Get all comments for a blog, newest first.

        Args:
            blog_id: Blog ID

        Returns:
            List of comments
        """
        with logfire.span("comment_service.get_comments_for_blog", blog_id=str(blog_id)):
            comments = await self.comment_repository.find_by_blog(blog_id)
            logfire.info(
                "Comments retrieved for blog", blog_id=str(blog_id), count=len(comments)
            )
            return comments
