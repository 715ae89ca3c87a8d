"""Domain value objects for Devnovate.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from devnovate.domain.value.common import RootValueObject, ValueObject
from devnovate.domain.value.identifiers import UserId


class BlogStatus(str, Enum):
    """Lifecycle state of a blog post.

    draft -> pending -> published / rejected, published <-> hidden.
    """

    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"
    HIDDEN = "hidden"


class ModerationAction(str, Enum):
    """Requested status change."""

    SUBMIT = "submit"  # Author: draft -> pending
    APPROVE = "approve"  # Moderator
    REJECT = "reject"  # Moderator
    HIDE = "hide"  # Moderator
    UNHIDE = "unhide"  # Moderator, approve restricted to hidden posts


class UserRole(str, Enum):
    """Capability level of a user."""

    USER = "user"
    MODERATOR = "moderator"


class BlogSortField(str, Enum):
    """Sort key for blog listings."""

    CREATED_AT = "created_at"
    VIEWS = "views"
    LIKES = "likes"
    POPULARITY = "popularity"  # likes, then views


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class TrendingAlgorithm(str, Enum):
    """Scoring used to rank trending blogs."""

    ENGAGEMENT = "engagement"  # likes*5 + comments*10 + views*0.1
    VELOCITY = "velocity"  # engagement per hour of age
    RECENT = "recent"  # light engagement minus age in days
    POPULARITY = "popularity"  # likes, then views


class TrendingPeriod(str, Enum):
    """How far back the trending listing looks."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @property
    def days(self) -> Optional[int]:
        """Length of the window in days, None for no limit."""
        return _PERIOD_DAYS[self]


_PERIOD_DAYS: dict[TrendingPeriod, Optional[int]] = {
    TrendingPeriod.DAY: 1,
    TrendingPeriod.WEEK: 7,
    TrendingPeriod.MONTH: 30,
    TrendingPeriod.ALL: None,
}


class NotificationKind(str, Enum):
    """Events sent to the notification collaborator."""

    APPROVED = "approved"
    REJECTED = "rejected"
    NEW_COMMENT = "new_comment"
    WELCOME = "welcome"


class Tag(RootValueObject[str]):
    """Blog tag.

    Lowercase letters, digits, '-', '+', '#' and '.', 1-30 characters.
    Examples: 'python', 'c++', 'next.js', 'machine-learning'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_tag(cls, v: str) -> str:
        """Normalize and validate tag format."""
        if not isinstance(v, str):
            raise ValueError("Tag must be a string")
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9][a-z0-9.+#-]{0,29}$", v):
            raise ValueError(
                "Tag must be 1-30 characters: lowercase letters, digits, '-', '+', '#', '.'"
            )
        return v


class Actor(ValueObject):
    """Verified caller identity supplied by the identity collaborator."""

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_moderator(self) -> bool:
        return self.role == UserRole.MODERATOR


class AuthorSnapshot(ValueObject):
    """Commenter details copied onto a comment at write time.

    Later profile changes are intentionally not reflected.
    """

    display_name: str = Field(min_length=1, max_length=100)
    email: str = ""
