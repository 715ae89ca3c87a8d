"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from devnovate.domain.error import NotFoundError
from devnovate.domain.service import UserService
from devnovate.domain.value import UserId, UserRole
from devnovate.persistence.repository.inmemory import InMemoryStore, InMemoryUserRepository


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_creates_profile(self):
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        user_id = UserId(uuid4())

        user, created = await service.register(user_id, "Grace.Hopper@Example.com")

        assert created is True
        assert user.id == user_id
        assert user.email == "grace.hopper@example.com"
        assert user.display_name == "Grace.Hopper"
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_register_is_idempotent(self):
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        user_id = UserId(uuid4())

        first, _ = await service.register(user_id, "ada@example.com")
        second, created = await service.register(user_id, "ada@example.com")

        assert created is False
        assert second == first
        assert await service.count_users() == 1


class TestSetRole:
    """Tests for UserService.set_role()."""

    @pytest.mark.asyncio
    async def test_promote_by_email(self):
        service = UserService(InMemoryUserRepository(InMemoryStore()))
        user, _ = await service.register(UserId(uuid4()), "mod@example.com")

        promoted = await service.set_role("MOD@example.com", UserRole.MODERATOR)

        assert promoted.id == user.id
        assert promoted.role == UserRole.MODERATOR
        assert promoted.as_actor().is_moderator

    @pytest.mark.asyncio
    async def test_unknown_email_raises(self):
        service = UserService(InMemoryUserRepository(InMemoryStore()))

        with pytest.raises(NotFoundError):
            await service.set_role("nobody@example.com", UserRole.MODERATOR)
