"""Domain services."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .moderation_service import ModerationService
from .notification_service import NotificationClient, NotificationService
from .user_service import UserService

__all__ = [
    "BlogService",
    "CommentService",
    "JWTService",
    "LikeService",
    "ModerationService",
    "NotificationClient",
    "NotificationService",
    "Service",
    "UserService",
]
