"""User aggregate root.

Identity is owned by the external identity provider; this is the local
profile holding display details and the moderation role.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devnovate.domain.model.common import DomainModel
from devnovate.domain.value import Actor, AuthorSnapshot, UserId, UserRole


class User(DomainModel):
    """Local user profile."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    display_name: str = Field(min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def as_actor(self) -> Actor:
        """Caller identity for authorization checks."""
        return Actor(user_id=self.id, role=self.role)

    def snapshot(self) -> AuthorSnapshot:
        """Point-in-time copy of the display details."""
        return AuthorSnapshot(display_name=self.display_name, email=self.email)
