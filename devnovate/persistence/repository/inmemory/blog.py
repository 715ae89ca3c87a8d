"""In-memory blog repository for testing."""

from datetime import datetime
from typing import List, Optional

from devnovate.domain.model.blog import Blog
from devnovate.domain.model.trending import rank_key
from devnovate.domain.repository.blog import BlogQuery, BlogRepository, TagCount
from devnovate.domain.value import (
    BlogId,
    BlogSortField,
    BlogStatus,
    SortOrder,
    Tag,
    TrendingAlgorithm,
    UserId,
)

from .store import InMemoryStore


def _matches(blog: Blog, query: BlogQuery) -> bool:
    if query.status is not None and blog.status != query.status:
        return False
    if query.tag is not None and query.tag not in blog.tags:
        return False
    if query.author_id is not None and blog.author_id != query.author_id:
        return False
    if query.search:
        needle = query.search.lower()
        if needle not in blog.title.lower() and needle not in blog.content.lower():
            return False
    if query.title and query.title.lower() not in blog.title.lower():
        return False
    if query.date_from is not None and blog.created_at < query.date_from:
        return False
    if query.date_to is not None and blog.created_at > query.date_to:
        return False
    return True


def _sort_key(query: BlogQuery):
    if query.sort == BlogSortField.VIEWS:
        return lambda b: (b.views, b.created_at)
    if query.sort == BlogSortField.LIKES:
        return lambda b: (b.likes, b.created_at)
    if query.sort == BlogSortField.POPULARITY:
        return lambda b: (b.likes, b.views, b.created_at)
    return lambda b: b.created_at


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing.

    Updates replace the stored model in one step with no await in between,
    which is as atomic as the single-threaded event loop allows.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self.store.blogs.get(blog_id)

    async def find_all(
        self, query: BlogQuery, limit: int = 10, offset: int = 0
    ) -> List[Blog]:
        """Find blogs matching a query."""
        blogs = [b for b in self.store.blogs.values() if _matches(b, query)]
        blogs.sort(key=_sort_key(query), reverse=query.order == SortOrder.DESC)
        return blogs[offset : offset + limit]

    async def count(self, query: BlogQuery) -> int:
        """Count blogs matching a query."""
        return sum(1 for b in self.store.blogs.values() if _matches(b, query))

    async def find_by_author(self, author_id: UserId) -> List[Blog]:
        """Find every blog by an author, newest first."""
        blogs = [b for b in self.store.blogs.values() if b.author_id == author_id]
        return sorted(blogs, key=lambda b: b.created_at, reverse=True)

    async def find_trending(
        self,
        algorithm: TrendingAlgorithm,
        since: Optional[datetime],
        limit: int = 10,
    ) -> List[Blog]:
        """Find published blogs ranked by a trending algorithm."""
        blogs = [
            b
            for b in self.store.blogs.values()
            if b.is_published and (since is None or b.created_at >= since)
        ]
        blogs.sort(key=rank_key(algorithm, datetime.now()), reverse=True)
        return blogs[:limit]

    async def popular_tags(
        self, limit: int = 50, containing: Optional[str] = None
    ) -> List[TagCount]:
        """Most used tags across published blogs."""
        needle = containing.lower() if containing else None
        counts: dict[str, int] = {}
        for blog in self.store.blogs.values():
            if blog.is_published:
                for tag in blog.tags:
                    if needle and needle not in tag.root:
                        continue
                    counts[tag.root] = counts.get(tag.root, 0) + 1
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return [TagCount(tag=tag, count=count) for tag, count in ranked[:limit]]

    async def total_views(self) -> int:
        """Sum of views across all blogs."""
        return sum(b.views for b in self.store.blogs.values())

    async def save(self, blog: Blog) -> Blog:
        """Insert a new blog."""
        self.store.blogs[blog.id] = blog
        return blog

    async def update_content(
        self,
        blog_id: BlogId,
        title: str,
        content: str,
        excerpt: str,
        tags: List[Tag],
    ) -> Optional[Blog]:
        """Update the editable fields of a blog."""
        blog = self.store.blogs.get(blog_id)
        if not blog:
            return None
        updated = blog.revise(
            title=title,
            content=content,
            excerpt=excerpt,
            tags=tags,
            updated_at=datetime.now(),
        )
        self.store.blogs[blog_id] = updated
        return updated

    async def transition_status(
        self,
        blog_id: BlogId,
        expected: BlogStatus,
        new_status: BlogStatus,
        rejection_reason: Optional[str] = None,
    ) -> Optional[Blog]:
        """Compare-and-set the status of a blog."""
        blog = self.store.blogs.get(blog_id)
        if not blog or blog.status != expected:
            return None
        updated = blog.revise(
            status=new_status,
            rejection_reason=(
                rejection_reason if new_status == BlogStatus.REJECTED else None
            ),
            updated_at=datetime.now(),
        )
        self.store.blogs[blog_id] = updated
        return updated

    async def record_view(self, blog_id: BlogId) -> Optional[Blog]:
        """Increment views of a published blog."""
        blog = self.store.blogs.get(blog_id)
        if not blog or not blog.is_published:
            return None
        updated = blog.revise(views=blog.views + 1)
        self.store.blogs[blog_id] = updated
        return updated

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog with its likes and comments."""
        if self.store.blogs.pop(blog_id, None) is None:
            return False
        for key in [k for k in self.store.likes if k[0] == blog_id]:
            del self.store.likes[key]
        self.store.comments[:] = [c for c in self.store.comments if c.blog_id != blog_id]
        return True
