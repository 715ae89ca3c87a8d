"""In-memory comment repository for testing."""

from devnovate.domain.error import NotFoundError
from devnovate.domain.model.comment import Comment
from devnovate.domain.repository.comment import CommentRepository
from devnovate.domain.value import BlogId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def add(self, comment: Comment) -> Comment:
        """Append a comment and bump Blog.comments."""
        blog = self.store.blogs.get(comment.blog_id)
        if not blog:
            raise NotFoundError("Blog", str(comment.blog_id))

        self.store.comments.append(comment)
        self.store.blogs[blog.id] = blog.revise(comments=blog.comments + 1)
        return comment

    async def find_by_blog(self, blog_id: BlogId) -> list[Comment]:
        """Find all comments on a blog, newest first."""
        comments = [c for c in self.store.comments if c.blog_id == blog_id]
        # Insertion order breaks timestamp ties
        return list(reversed(sorted(comments, key=lambda c: c.created_at)))

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count comments on a blog."""
        return sum(1 for c in self.store.comments if c.blog_id == blog_id)
