"""In-memory like repository for testing."""

from datetime import datetime
from uuid import uuid4

from devnovate.domain.error import NotFoundError
from devnovate.domain.model.like import Like
from devnovate.domain.repository.like import LikeRepository, LikeToggle
from devnovate.domain.value import BlogId, LikeId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def exists(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether the user has liked the blog."""
        return (blog_id, user_id) in self.store.likes

    async def toggle(self, blog_id: BlogId, user_id: UserId) -> LikeToggle:
        """Flip the Like fact and adjust Blog.likes with no await in between."""
        blog = self.store.blogs.get(blog_id)
        if not blog:
            raise NotFoundError("Blog", str(blog_id))

        key = (blog_id, user_id)
        if key in self.store.likes:
            del self.store.likes[key]
            liked, delta = False, -1
        else:
            self.store.likes[key] = Like(
                id=LikeId(uuid4()),
                blog_id=blog_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            liked, delta = True, 1

        updated = blog.revise(likes=blog.likes + delta)
        self.store.blogs[blog_id] = updated
        return LikeToggle(liked=liked, likes=updated.likes)

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count Like facts for a blog."""
        return sum(1 for b, _ in self.store.likes if b == blog_id)
