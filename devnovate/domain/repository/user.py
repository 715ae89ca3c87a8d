"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devnovate.domain.model.user import User
from devnovate.domain.value import UserId, UserRole


class UserRepository(ABC):
    """Repository for User profiles."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        pass

    @abstractmethod
    async def search_by_display_name(self, fragment: str, limit: int) -> List[User]:
        """Users whose display name contains `fragment`, ignoring case.

        Ordered by display name.
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        """Change a user's role.

        Returns:
            Updated user, or None if not found
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
        pass
