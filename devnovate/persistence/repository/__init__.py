"""PostgreSQL repository implementations."""

from devnovate.persistence.repository.blog import PostgresBlogRepository
from devnovate.persistence.repository.comment import PostgresCommentRepository
from devnovate.persistence.repository.like import PostgresLikeRepository
from devnovate.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
