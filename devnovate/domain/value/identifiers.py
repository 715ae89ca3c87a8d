"""Strongly typed identifiers for Devnovate domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
BlogId = NewType("BlogId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
