"""Unit tests for ModerationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from devnovate.adapter.notification import MockNotificationClient
from devnovate.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
)
from devnovate.domain.repository import BlogRepository
from devnovate.domain.service import ModerationService, NotificationService
from devnovate.domain.value import (
    Actor,
    BlogId,
    BlogStatus,
    ModerationAction,
    UserId,
    UserRole,
)
from devnovate.persistence.repository.inmemory import InMemoryBlogRepository, InMemoryStore
from tests.conftest import make_blog
from tests.harness import commit, create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

MODERATOR = Actor(user_id=UserId(uuid4()), role=UserRole.MODERATOR)


class RacingBlogRepository(InMemoryBlogRepository):
    """Blog repository where another moderator wins every status change."""

    async def transition_status(self, blog_id, expected, new_status, rejection_reason=None):
        blog = self.store.blogs[blog_id]
        self.store.blogs[blog_id] = blog.model_copy(update={"status": BlogStatus.HIDDEN})
        return await super().transition_status(
            blog_id, expected, new_status, rejection_reason
        )


class TestApply:
    """Tests for ModerationService.apply."""

    @pytest.mark.asyncio
    async def test_approve_publishes_and_notifies(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)

        blog = await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))

        updated = await moderation_service.apply(
            blog.id, ModerationAction.APPROVE, MODERATOR
        )

        assert updated.status == BlogStatus.PUBLISHED
        assert (await blog_repo.find_by_id(blog.id)).status == BlogStatus.PUBLISHED
        assert notifier.sent == []

        await commit(unit_env)

        [event] = notifier.events("blog-status")
        assert event["status"] == "published"
        assert event["authorId"] == str(blog.author_id)

    @pytest.mark.asyncio
    async def test_reject_stores_trimmed_reason(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)

        blog = await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))

        updated = await moderation_service.apply(
            blog.id, ModerationAction.REJECT, MODERATOR, reason="  Off-topic  "
        )

        await commit(unit_env)

        assert updated.status == BlogStatus.REJECTED
        assert updated.rejection_reason == "Off-topic"
        assert notifier.events("blog-status")[0]["reason"] == "Off-topic"

    @pytest.mark.asyncio
    async def test_reapproval_clears_reason(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))
        await moderation_service.apply(
            blog.id, ModerationAction.REJECT, MODERATOR, reason="Needs sources"
        )

        updated = await moderation_service.apply(
            blog.id, ModerationAction.APPROVE, MODERATOR
        )

        assert updated.status == BlogStatus.PUBLISHED
        assert updated.rejection_reason is None

    @pytest.mark.asyncio
    async def test_hide_is_silent(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        updated = await moderation_service.apply(blog.id, ModerationAction.HIDE, MODERATOR)

        await commit(unit_env)

        assert updated.status == BlogStatus.HIDDEN
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_author_submits_draft(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        blog = await blog_repo.save(make_blog(author, status=BlogStatus.DRAFT))

        updated = await moderation_service.apply(
            blog.id, ModerationAction.SUBMIT, Actor(user_id=author)
        )

        assert updated.status == BlogStatus.PENDING

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action, status",
        [
            (ModerationAction.APPROVE, BlogStatus.PENDING),
            (ModerationAction.REJECT, BlogStatus.PENDING),
            (ModerationAction.HIDE, BlogStatus.PUBLISHED),
            (ModerationAction.UNHIDE, BlogStatus.HIDDEN),
        ],
    )
    async def test_regular_user_forbidden_and_blog_unchanged(
        self, unit_env, action, status
    ):
        """A refused action leaves status, reason and timestamps as they were."""
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)

        before = await blog_repo.save(
            make_blog(
                UserId(uuid4()),
                status=status,
                created_at=datetime.now() - timedelta(days=1),
            )
        )

        with pytest.raises(ForbiddenError):
            await moderation_service.apply(
                before.id, action, Actor(user_id=UserId(uuid4())), reason="spam"
            )
        await commit(unit_env)

        after = await blog_repo.find_by_id(before.id)
        assert after == before
        assert after.updated_at == before.updated_at
        assert notifier.sent == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action, status",
        [
            (ModerationAction.APPROVE, BlogStatus.DRAFT),
            (ModerationAction.REJECT, BlogStatus.PUBLISHED),
            (ModerationAction.HIDE, BlogStatus.PENDING),
            (ModerationAction.UNHIDE, BlogStatus.REJECTED),
        ],
    )
    async def test_invalid_edge_raises_and_blog_unchanged(
        self, unit_env, action, status
    ):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)

        before = await blog_repo.save(
            make_blog(
                UserId(uuid4()),
                status=status,
                created_at=datetime.now() - timedelta(days=1),
            )
        )

        with pytest.raises(InvalidTransitionError):
            await moderation_service.apply(before.id, action, MODERATOR, reason="spam")
        await commit(unit_env)

        after = await blog_repo.find_by_id(before.id)
        assert after == before
        assert after.updated_at == before.updated_at
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_missing_blog_raises(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError):
            await moderation_service.apply(
                BlogId(uuid4()), ModerationAction.APPROVE, MODERATOR
            )

    @pytest.mark.asyncio
    async def test_notification_failure_keeps_transition(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        blog_repo = await unit_env.get(BlogRepository)
        notifier = await unit_env.get(MockNotificationClient)
        notifier.fail = True

        blog = await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))

        updated = await moderation_service.apply(
            blog.id, ModerationAction.APPROVE, MODERATOR
        )

        assert updated.status == BlogStatus.PUBLISHED


class TestConcurrentModeration:
    """Compare-and-set behaviour when two moderators race."""

    @pytest.mark.asyncio
    async def test_lost_race_raises_conflict(self):
        store = InMemoryStore()
        blog_repo = RacingBlogRepository(store)
        notifier = MockNotificationClient()
        service = ModerationService(blog_repo, NotificationService(notifier))

        blog = await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))

        with pytest.raises(ConflictError):
            await service.apply(blog.id, ModerationAction.APPROVE, MODERATOR)

        # The winner's status stands and nobody is notified
        assert store.blogs[blog.id].status == BlogStatus.HIDDEN
        assert notifier.sent == []
