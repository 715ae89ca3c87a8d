"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from devnovate.domain.model.comment import Comment
from devnovate.domain.value import BlogId


class CommentRepository(ABC):
    """Repository for Comment facts.

    Comments are append-only; `add` also increments Blog.comments.
    """

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a comment and increment the blog's comment counter atomically.

        Args:
            comment: The comment to insert

        Returns:
            The saved comment

        Raises:
            NotFoundError: If the blog no longer exists
        """
        pass

    @abstractmethod
    async def find_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all comments on a blog, newest first."""
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count comments on a blog."""
        pass
