"""Classification of PostgreSQL integrity errors raised through asyncpg."""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


@dataclass(frozen=True)
class Violation:
    """SQLSTATE and constraint name of a failed write."""

    sqlstate: Optional[str]
    constraint: Optional[str]

    @property
    def is_foreign_key(self) -> bool:
        return self.sqlstate == FOREIGN_KEY_VIOLATION

    @property
    def is_unique(self) -> bool:
        return self.sqlstate == UNIQUE_VIOLATION

    def on_column(self, column: str) -> bool:
        """Whether the constraint is PostgreSQL's default name for `column`'s key."""
        return bool(self.constraint) and f"_{column}_" in f"_{self.constraint}_"


def classify(error: IntegrityError) -> Violation:
    """Read the SQLSTATE and constraint off the driver error.

    SQLAlchemy's asyncpg adapter exposes `pgcode`; the asyncpg exception it
    wraps (its `__cause__`) carries `sqlstate` and `constraint_name`.
    """
    orig = error.orig
    driver = getattr(orig, "__cause__", None)
    sqlstate = getattr(orig, "pgcode", None) or getattr(driver, "sqlstate", None)
    constraint = getattr(driver, "constraint_name", None) or getattr(
        orig, "constraint_name", None
    )
    return Violation(sqlstate=sqlstate, constraint=constraint)
