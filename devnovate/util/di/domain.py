"""Domain layer DI providers."""

from dishka import Scope, provide

from devnovate.config import AuthSettings
from devnovate.domain.repository import (
    AfterCommit,
    BlogRepository,
    CommentRepository,
    LikeRepository,
    UserRepository,
)
from devnovate.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    ModerationService,
    NotificationClient,
    NotificationService,
    UserService,
)
from devnovate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self, notification_client: NotificationClient, after_commit: AfterCommit
    ) -> NotificationService:
        """Provide notification domain service, delivering after the commit."""
        return NotificationService(client=notification_client, after_commit=after_commit)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_moderation_service(
        self,
        blog_repository: BlogRepository,
        notification_service: NotificationService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            blog_repository=blog_repository,
            notification_service=notification_service,
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, blog_service: BlogService
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository, blog_service=blog_service)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        blog_service: BlogService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            blog_service=blog_service,
            user_service=user_service,
            notification_service=notification_service,
        )
