"""Domain model entities for Devnovate."""

from devnovate.domain.model.blog import Blog
from devnovate.domain.model.comment import Comment
from devnovate.domain.model.like import Like
from devnovate.domain.model.user import User

__all__ = [
    "Blog",
    "Comment",
    "Like",
    "User",
]
