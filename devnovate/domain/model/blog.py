"""Blog aggregate root.

A blog post moves through the moderation workflow and carries derived
engagement counters (views, likes, comments).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from devnovate.domain.model.common import DomainModel
from devnovate.domain.value import BlogId, BlogStatus, Tag, UserId

EXCERPT_LENGTH = 200


def make_excerpt(content: str) -> str:
    """Default excerpt: the first 200 characters, with an ellipsis when cut."""
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH] + "..."


class Blog(DomainModel):
    """Blog aggregate root.

    Business rules:
    - `status` is always one of the BlogStatus values
    - `rejection_reason` is only set while the blog is rejected
    - `views`, `likes` and `comments` only change through the atomic
      counter operations on the repositories
    """

    id: BlogId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str = ""
    tags: list[Tag] = Field(default_factory=list, max_length=10)
    author_id: UserId
    status: BlogStatus = BlogStatus.PENDING
    rejection_reason: Optional[str] = None
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_rejection_reason(self) -> "Blog":
        """Only rejected blogs may carry a rejection reason."""
        if self.rejection_reason is not None and self.status != BlogStatus.REJECTED:
            raise ValueError("rejection_reason is only allowed on rejected blogs")
        return self

    @property
    def is_published(self) -> bool:
        return self.status == BlogStatus.PUBLISHED
