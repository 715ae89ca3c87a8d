"""Repository interfaces for the Devnovate domain.

Interfaces live in the domain layer (dependency inversion);
implementations live in the persistence layer.
"""

from devnovate.domain.repository.after_commit import AfterCommit
from devnovate.domain.repository.blog import BlogQuery, BlogRepository, TagCount
from devnovate.domain.repository.comment import CommentRepository
from devnovate.domain.repository.like import LikeRepository, LikeToggle
from devnovate.domain.repository.user import UserRepository

__all__ = [
    "AfterCommit",
    "BlogQuery",
    "BlogRepository",
    "CommentRepository",
    "LikeRepository",
    "LikeToggle",
    "TagCount",
    "UserRepository",
]
