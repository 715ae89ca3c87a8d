"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from devnovate.domain.model import Blog, User
from devnovate.domain.value import BlogId, BlogStatus, Tag, UserId, UserRole


def make_user(
    display_name: str = "Ada",
    email: str | None = None,
    role: UserRole = UserRole.USER,
) -> User:
    """Build a user profile with a fresh ID."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        email=email or f"{display_name.lower()}-{str(user_id)[:8]}@example.com",
        display_name=display_name,
        role=role,
        created_at=datetime.now(),
        updated_at=datetime.now(),
    )


def make_blog(
    author_id: UserId,
    status: BlogStatus = BlogStatus.PUBLISHED,
    title: str = "Understanding asyncio",
    content: str = "Event loops, tasks and futures explained.",
    tags: list[str] | None = None,
    views: int = 0,
    likes: int = 0,
    created_at: datetime | None = None,
    comments: int = 0,
) -> Blog:
    """Build a blog with a fresh ID, published by default."""
    created = created_at or datetime.now()
    return Blog(
        id=BlogId(uuid4()),
        title=title,
        content=content,
        excerpt=content[:200],
        tags=[Tag(t) for t in (tags or ["python"])],
        author_id=author_id,
        status=status,
        views=views,
        likes=likes,
        comments=comments,
        created_at=created,
        updated_at=created,
    )
