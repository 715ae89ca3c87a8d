#!/usr/bin/env python3
"""Apply (or roll back) database migrations.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from devnovate.config import Settings
from devnovate.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "revision", nargs="?", default="head", help="Target revision (default: head)"
    )
    parser.add_argument(
        "--downgrade", action="store_true", help="Downgrade to the target revision"
    )
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    direction = "downgrade" if args.downgrade else "upgrade"
    with logfire.span(
        "migrations.run",
        direction=direction,
        revision=args.revision,
        environment=settings.environment,
    ):
        alembic_cfg = Config(args.config)
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception:
            # The deploy must not start the API against a half-migrated schema
            logfire.exception("Database migration failed", direction=direction)
            raise

    logfire.info("Database migrations completed", direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
