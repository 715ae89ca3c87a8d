"""Like repository interface."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from devnovate.domain.value import BlogId, UserId


class LikeToggle(BaseModel):
    """Outcome of a like toggle."""

    liked: bool
    likes: int  # Blog.likes after the toggle


class LikeRepository(ABC):
    """Repository for Like facts.

    Owns the pairing between a Like row and Blog.likes: every write to the
    fact table adjusts the counter in the same atomic unit.
    """

    @abstractmethod
    async def exists(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether the user has liked the blog."""
        pass

    @abstractmethod
    async def toggle(self, blog_id: BlogId, user_id: UserId) -> LikeToggle:
        """Like or unlike atomically.

        If a Like exists it is deleted and Blog.likes decremented by one;
        otherwise one is created and Blog.likes incremented by one. Both
        writes commit together or not at all.

        Raises:
            ConflictError: If a concurrent write violated the unique constraint
        """
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count Like facts for a blog."""
        pass
