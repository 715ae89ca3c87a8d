"""Like domain service."""

import logfire

from devnovate.domain.repository import LikeRepository, LikeToggle
from devnovate.domain.value import BlogId, UserId

from .base import Service
from .blog_service import BlogService


class LikeService(Service):
    """Domain service for likes.

    Blog.likes always tracks the number of Like facts; both change in the
    repository's single toggle operation.
    """

    def __init__(self, like_repository: LikeRepository, blog_service: BlogService) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            blog_service: Blog domain service
        """
        self.like_repository = like_repository
        self.blog_service = blog_service

    async def toggle_like(self, blog_id: BlogId, user_id: UserId) -> LikeToggle:
        """Like the blog, or unlike it if already liked.

        Args:
            blog_id: Blog ID
            user_id: User ID

        Returns:
            The new liked state and like count

        Raises:
            NotFoundError: If the blog doesn't exist
            ConflictError: If a concurrent toggle collided
        """
        with logfire.span("like_service.toggle_like", blog_id=str(blog_id), user_id=str(user_id)):
            await self.blog_service.require_blog(blog_id)

            result = await self.like_repository.toggle(blog_id, user_id)
            logfire.info(
                "Like toggled",
                blog_id=str(blog_id),
                user_id=str(user_id),
                liked=result.liked,
                likes=result.likes,
            )
            return result

    async def has_liked(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether a user has liked a blog."""
        return await self.like_repository.exists(blog_id, user_id)
