"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from devnovate.domain.model import Blog, Comment, Like, User
from devnovate.domain.value import (
    AuthorSnapshot,
    BlogId,
    BlogStatus,
    CommentId,
    Tag,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        display_name=row["display_name"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    Args:
        row: Database row as dict

    Returns:
        Blog domain model
    """
    return Blog(
        id=BlogId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt") or "",
        tags=[Tag(t) for t in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        status=BlogStatus(row["status"]),
        rejection_reason=row.get("rejection_reason"),
        views=row["views"],
        likes=row["likes"],
        comments=row["comments"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict.

    Args:
        blog: Blog domain model

    Returns:
        Dict suitable for database insertion
    """
    data = blog.model_dump()
    data["status"] = blog.status.value
    data["tags"] = [t.root for t in blog.tags]
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author=AuthorSnapshot(
            display_name=row["author_display_name"],
            email=row.get("author_email") or "",
        ),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The author snapshot is flattened into two columns.
    """
    return {
        "id": comment.id,
        "blog_id": comment.blog_id,
        "author_id": comment.author_id,
        "author_display_name": comment.author.display_name,
        "author_email": comment.author.email,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()
