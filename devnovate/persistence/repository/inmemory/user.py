"""In-memory user repository for testing."""

from datetime import datetime
from typing import List, Optional

from devnovate.domain.model.user import User
from devnovate.domain.repository.user import UserRepository
from devnovate.domain.value import UserId, UserRole

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        needle = email.strip().lower()
        for user in self.store.users.values():
            if user.email.lower() == needle:
                return user
        return None

    async def search_by_display_name(self, fragment: str, limit: int) -> List[User]:
        """Users whose display name contains `fragment`, ignoring case."""
        needle = fragment.lower()
        users = [
            u for u in self.store.users.values() if needle in u.display_name.lower()
        ]
        users.sort(key=lambda u: (u.display_name, str(u.id)))
        return users[:limit]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self.store.users[user.id] = user
        return user

    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        """Change a user's role."""
        user = self.store.users.get(user_id)
        if not user:
            return None
        updated = user.revise(role=role, updated_at=datetime.now())
        self.store.users[user_id] = updated
        return updated

    async def count(self) -> int:
        """Count registered users."""
        return len(self.store.users)
