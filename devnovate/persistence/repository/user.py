"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devnovate.domain.model import User
from devnovate.domain.repository import UserRepository
from devnovate.domain.value import UserId, UserRole
from devnovate.persistence.mappers import row_to_user, user_to_dict
from devnovate.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users table access. Email lookups ignore case."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._one(select(users_table).where(users_table.c.id == user_id))

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._one(
            select(users_table).where(
                func.lower(users_table.c.email) == email.strip().lower()
            )
        )

    async def search_by_display_name(self, fragment: str, limit: int) -> List[User]:
        stmt = (
            select(users_table)
            .where(users_table.c.display_name.icontains(fragment, autoescape=True))
            .order_by(users_table.c.display_name, users_table.c.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the profile row with the same ID."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        user = await self._one(
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(role=role.value, updated_at=datetime.now())
            .returning(users_table)
        )
        await self.session.flush()
        return user

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()
