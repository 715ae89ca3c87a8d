#!/usr/bin/env python3
"""Grant (or revoke) the moderator role for a registered user.

Usage:
    python scripts/promote_moderator.py alice@example.com
    python scripts/promote_moderator.py alice@example.com --revoke
"""

import argparse
import asyncio
import sys

import logfire

from devnovate.config import Settings
from devnovate.domain.error import NotFoundError
from devnovate.domain.service import UserService
from devnovate.domain.value import UserRole
from devnovate.persistence.database import create_engine, create_session_factory
from devnovate.persistence.repository import PostgresUserRepository
from devnovate.util.observability import configure_logfire


async def set_role(settings: Settings, email: str, role: UserRole) -> int:
    """Change the role of the user with `email` in one transaction."""
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            async with session.begin():
                service = UserService(PostgresUserRepository(session))
                try:
                    user = await service.set_role(email, role)
                except NotFoundError:
                    logfire.error("No registered user with this email", email=email)
                    return 1

        logfire.info(
            "Role updated",
            user_id=str(user.id),
            email=user.email,
            role=user.role.value,
        )
        return 0
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Email of a registered user")
    parser.add_argument(
        "--revoke",
        action="store_true",
        help="Demote the user back to a regular user",
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    role = UserRole.USER if args.revoke else UserRole.MODERATOR
    return asyncio.run(set_role(settings, args.email, role))


if __name__ == "__main__":
    sys.exit(main())
