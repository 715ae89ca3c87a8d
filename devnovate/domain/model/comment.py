"""Comment entity.

Comments are append-only facts; each one is counted in Blog.comments.
"""

from datetime import datetime

from pydantic import Field

from devnovate.domain.model.common import DomainModel
from devnovate.domain.value import AuthorSnapshot, BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment on a blog post.

    `author` is a snapshot of the commenter's profile at write time,
    not a live reference.
    """

    id: CommentId
    blog_id: BlogId
    author_id: UserId
    author: AuthorSnapshot
    content: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
