"""Domain value objects for Devnovate."""

from devnovate.domain.value.identifiers import (
    BlogId,
    CommentId,
    LikeId,
    UserId,
)
from devnovate.domain.value.types import (
    Actor,
    AuthorSnapshot,
    BlogSortField,
    BlogStatus,
    ModerationAction,
    NotificationKind,
    SortOrder,
    Tag,
    TrendingAlgorithm,
    TrendingPeriod,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "LikeId",
    # Types
    "Actor",
    "AuthorSnapshot",
    "BlogSortField",
    "BlogStatus",
    "ModerationAction",
    "NotificationKind",
    "SortOrder",
    "Tag",
    "TrendingAlgorithm",
    "TrendingPeriod",
    "UserRole",
]
