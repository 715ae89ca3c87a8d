"""Shared state for the in-memory repositories.

All in-memory repositories built from one store see the same data, so a
like toggle written through one repository is visible to the blog
repository and the fact/counter pairing can be checked.
"""

from dataclasses import dataclass, field

from devnovate.domain.model import Blog, Comment, Like, User
from devnovate.domain.value import BlogId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database."""

    users: dict[UserId, User] = field(default_factory=dict)
    blogs: dict[BlogId, Blog] = field(default_factory=dict)
    likes: dict[tuple[BlogId, UserId], Like] = field(default_factory=dict)
    comments: list[Comment] = field(default_factory=list)
