"""User domain service."""

from datetime import datetime
from typing import List, Optional

import logfire

from devnovate.domain.error import NotFoundError
from devnovate.domain.model.user import User
from devnovate.domain.repository import UserRepository
from devnovate.domain.value import UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user profiles."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email)

    async def register(self, user_id: UserId, email: str) -> tuple[User, bool]:
        """Create the local profile for a verified identity.

        Idempotent: an existing profile is returned as is. The display name
        defaults to the local part of the email.

        Args:
            user_id: Subject of the verified identity
            email: Verified email

        Returns:
            The profile and whether it was created by this call
        """
        with logfire.span("user_service.register", user_id=str(user_id)):
            existing = await self.user_repository.find_by_id(user_id)
            if existing:
                logfire.info("User already registered", user_id=str(user_id))
                return existing, False

            now = datetime.now()
            user = User(
                id=user_id,
                email=email.strip().lower(),
                display_name=email.split("@")[0] or "Developer",
                role=UserRole.USER,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved, True

    async def set_role(self, email: str, role: UserRole) -> User:
        """Grant or revoke a role by email.

        Raises:
            NotFoundError: If no user has this email
        """
        with logfire.span("user_service.set_role", role=role.value):
            user = await self.user_repository.find_by_email(email)
            if not user:
                raise NotFoundError("User", email)

            updated = await self.user_repository.set_role(user.id, role)
            if not updated:
                raise NotFoundError("User", email)

            logfire.info("User role changed", user_id=str(user.id), role=role.value)
            return updated

    async def count_users(self) -> int:
        """Count registered users."""
        return await self.user_repository.count()

    async def search_by_display_name(self, fragment: str, limit: int) -> List[User]:
        """Users whose display name contains `fragment`, ignoring case."""
        with logfire.span(
            "user_service.search_by_display_name", fragment=fragment, limit=limit
        ):
            return await self.user_repository.search_by_display_name(fragment, limit)
