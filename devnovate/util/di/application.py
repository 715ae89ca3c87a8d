"""Application layer DI providers."""

from dishka import Scope, provide

from devnovate.application.usecase.auth import GetCurrentUserUseCase, RegisterUseCase
from devnovate.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    ListMyBlogsUseCase,
    ListTagsUseCase,
    TrendingBlogsUseCase,
    UpdateBlogUseCase,
)
from devnovate.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from devnovate.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from devnovate.application.usecase.moderation import (
    GetStatsUseCase,
    ListModerationQueueUseCase,
    ModerateBlogUseCase,
)
from devnovate.application.usecase.search import SuggestSearchUseCase
from devnovate.config import TrendingSettings
from devnovate.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    ModerationService,
    NotificationService,
    UserService,
)
from devnovate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, notification_service: NotificationService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service, notification_service=notification_service
        )

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_get_blog_use_case(
        self,
        blog_service: BlogService,
        comment_service: CommentService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(
            blog_service=blog_service,
            comment_service=comment_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_blogs_use_case(self, blog_service: BlogService) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_list_my_blogs_use_case(
        self, blog_service: BlogService
    ) -> ListMyBlogsUseCase:
        """Provide list my blogs use case."""
        return ListMyBlogsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_update_blog_use_case(self, blog_service: BlogService) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_blog_use_case(self, blog_service: BlogService) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_trending_blogs_use_case(
        self, blog_service: BlogService, settings: TrendingSettings
    ) -> TrendingBlogsUseCase:
        """Provide trending blogs use case."""
        return TrendingBlogsUseCase(blog_service=blog_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, blog_service: BlogService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(blog_service=blog_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_suggest_search_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> SuggestSearchUseCase:
        """Provide search suggestions use case."""
        return SuggestSearchUseCase(blog_service=blog_service, user_service=user_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_blog_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateBlogUseCase:
        """Provide moderate blog use case."""
        return ModerateBlogUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_moderation_queue_use_case(
        self, blog_service: BlogService
    ) -> ListModerationQueueUseCase:
        """Provide moderation queue use case."""
        return ListModerationQueueUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_stats_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(blog_service=blog_service, user_service=user_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, blog_service: BlogService, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            blog_service=blog_service, comment_service=comment_service
        )
