"""SQLAlchemy table definitions for Devnovate.

These match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from devnovate.domain.value import BlogStatus, UserRole

metadata = MetaData()

BLOG_STATUS_VALUES = tuple(s.value for s in BlogStatus)
USER_ROLE_VALUES = tuple(r.value for r in UserRole)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity provider subject
    Column("email", String(255), nullable=False),
    Column("display_name", String(100), nullable=False),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum(*USER_ROLE_VALUES, name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=False, server_default=""),
    Column("tags", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status",
        Enum(*BLOG_STATUS_VALUES, name="blog_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("rejection_reason", Text, nullable=True),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("comments", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "views >= 0 AND likes >= 0 AND comments >= 0",
        name="blog_counters_non_negative",
    ),
    CheckConstraint(
        "rejection_reason IS NULL OR status = 'rejected'",
        name="rejection_reason_only_when_rejected",
    ),
)

Index("idx_blogs_status_created_at", blogs_table.c.status, blogs_table.c.created_at.desc())
Index("idx_blogs_author_id", blogs_table.c.author_id)
Index("idx_blogs_tags", blogs_table.c.tags, postgresql_using="gin")

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("blog_id", "user_id", name="unique_like"),
)

Index("idx_likes_user_id", likes_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    # Snapshot of the author at write time
    Column("author_display_name", String(100), nullable=False),
    Column("author_email", String(255), nullable=False, server_default=""),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_blog_created", comments_table.c.blog_id, comments_table.c.created_at.desc())
