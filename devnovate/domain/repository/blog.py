"""Blog repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from devnovate.domain.model.blog import Blog
from devnovate.domain.value import (
    BlogId,
    BlogSortField,
    BlogStatus,
    SortOrder,
    Tag,
    TrendingAlgorithm,
    UserId,
)


class BlogQuery(BaseModel):
    """Filters and ordering for blog listings.

    A `status` of None matches every status.
    """

    status: Optional[BlogStatus] = BlogStatus.PUBLISHED
    tag: Optional[Tag] = None
    author_id: Optional[UserId] = None
    search: Optional[str] = None  # Case-insensitive substring of title or content
    title: Optional[str] = None  # Case-insensitive substring of title
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    sort: BlogSortField = BlogSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC


class TagCount(BaseModel):
    """Tag with the number of published blogs using it."""

    tag: str
    count: int


class BlogRepository(ABC):
    """Repository for the Blog aggregate.

    Every mutation is a single atomic update keyed by the blog ID;
    implementations must never read a whole row and write it back.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, query: BlogQuery, limit: int = 10, offset: int = 0
    ) -> List[Blog]:
        """Find blogs matching a query.

        Args:
            query: Filters and ordering
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            Matching blogs
        """
        pass

    @abstractmethod
    async def count(self, query: BlogQuery) -> int:
        """Count blogs matching a query (ordering is ignored)."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Blog]:
        """Find every blog by an author, any status, newest first."""
        pass

    @abstractmethod
    async def find_trending(
        self,
        algorithm: TrendingAlgorithm,
        since: Optional[datetime],
        limit: int = 10,
    ) -> List[Blog]:
        """Find published blogs ranked by a trending algorithm.

        Args:
            algorithm: Ranking, see `devnovate.domain.model.trending`
            since: Only blogs created at or after this moment; None for all
            limit: Maximum number of blogs to return
        """
        pass

    @abstractmethod
    async def popular_tags(
        self, limit: int = 50, containing: Optional[str] = None
    ) -> List[TagCount]:
        """Most used tags across published blogs, most frequent first.

        Args:
            limit: Maximum number of tags to return
            containing: Only tags with this case-insensitive substring
        """
        pass

    @abstractmethod
    async def total_views(self) -> int:
        """Sum of views across all blogs."""
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Insert a new blog.

        Args:
            blog: The blog to insert

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        blog_id: BlogId,
        title: str,
        content: str,
        excerpt: str,
        tags: List[Tag],
    ) -> Optional[Blog]:
        """Update the editable fields and refresh updated_at.

        Status and counters are left untouched.

        Returns:
            Updated blog, or None if the blog doesn't exist
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        blog_id: BlogId,
        expected: BlogStatus,
        new_status: BlogStatus,
        rejection_reason: Optional[str] = None,
    ) -> Optional[Blog]:
        """Atomically move a blog from `expected` to `new_status`.

        Compare-and-set: the update only applies while the stored status
        still equals `expected`. Sets rejection_reason (cleared unless the new
        status is rejected) and refreshes updated_at.

        Returns:
            Updated blog, or None if the blog is gone or its status changed
        """
        pass

    @abstractmethod
    async def record_view(self, blog_id: BlogId) -> Optional[Blog]:
        """Atomically increment views if the blog is published.

        Returns:
            Updated blog if the view was counted, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog (hard delete) with its likes and comments.

        Returns:
            True if a blog was deleted
        """
        pass
