"""initial_schema

Create the schema for Devnovate:
- Users (local profiles keyed by the identity provider subject)
- Blogs (moderation status, tags, denormalized engagement counters)
- Likes (one per user per blog)
- Comments (author display details copied at write time)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-12 14:05:11.402913

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE blog_status AS ENUM ('draft', 'pending', 'published', 'rejected', 'hidden');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('user', 'moderator');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),  # Identity provider subject
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "role",
            postgresql.ENUM("user", "moderator", name="user_role", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_email", "users", ["email"], unique=True)

    # ========================================================================
    # BLOGS table
    # ========================================================================
    op.create_table(
        "blogs",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(30)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "draft",
                "pending",
                "published",
                "rejected",
                "hidden",
                name="blog_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Counters are maintained by atomic increments and never go negative
        sa.CheckConstraint(
            "views >= 0 AND likes >= 0 AND comments >= 0",
            name="blog_counters_non_negative",
        ),
        sa.CheckConstraint(
            "rejection_reason IS NULL OR status = 'rejected'",
            name="rejection_reason_only_when_rejected",
        ),
    )
    op.create_index(
        "idx_blogs_status_created_at",
        "blogs",
        ["status", sa.text("created_at DESC")],
    )
    op.create_index("idx_blogs_author_id", "blogs", ["author_id"])
    # GIN index for tag containment filters
    op.execute("CREATE INDEX idx_blogs_tags ON blogs USING GIN(tags)")

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("blog_id", "user_id", name="unique_like"),
    )
    op.create_index("idx_likes_user_id", "likes", ["user_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_display_name", sa.String(100), nullable=False),
        sa.Column("author_email", sa.String(255), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_blog_created",
        "comments",
        ["blog_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_blog_created", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_likes_user_id", table_name="likes")
    op.drop_table("likes")

    op.execute("DROP INDEX IF EXISTS idx_blogs_tags")
    op.drop_index("idx_blogs_author_id", table_name="blogs")
    op.drop_index("idx_blogs_status_created_at", table_name="blogs")
    op.drop_table("blogs")

    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS user_role")
    op.execute("DROP TYPE IF EXISTS blog_status")
