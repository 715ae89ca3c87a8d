"""Unit tests for the moderation state machine."""

from uuid import uuid4

import pytest

from devnovate.domain.error import ForbiddenError, InvalidTransitionError, ValidationError
from devnovate.domain.model.moderation import (
    TRANSITIONS,
    can_delete,
    can_edit,
    notification_for,
    resolve_transition,
    validate_initial_status,
)
from devnovate.domain.value import (
    Actor,
    BlogStatus,
    ModerationAction,
    NotificationKind,
    UserId,
    UserRole,
)
from tests.conftest import make_blog

AUTHOR = UserId(uuid4())
MODERATOR = Actor(user_id=UserId(uuid4()), role=UserRole.MODERATOR)


def actor_for(action: ModerationAction) -> Actor:
    """The actor entitled to perform an action on a blog by AUTHOR."""
    if action == ModerationAction.SUBMIT:
        return Actor(user_id=AUTHOR)
    return MODERATOR


class TestResolveTransition:
    """Tests for resolve_transition."""

    @pytest.mark.parametrize(
        "current,action,expected",
        [
            (BlogStatus.DRAFT, ModerationAction.SUBMIT, BlogStatus.PENDING),
            (BlogStatus.PENDING, ModerationAction.APPROVE, BlogStatus.PUBLISHED),
            (BlogStatus.PENDING, ModerationAction.REJECT, BlogStatus.REJECTED),
            (BlogStatus.PUBLISHED, ModerationAction.HIDE, BlogStatus.HIDDEN),
            (BlogStatus.HIDDEN, ModerationAction.UNHIDE, BlogStatus.PUBLISHED),
            (BlogStatus.HIDDEN, ModerationAction.APPROVE, BlogStatus.PUBLISHED),
            (BlogStatus.REJECTED, ModerationAction.APPROVE, BlogStatus.PUBLISHED),
        ],
    )
    def test_allowed_edges(self, current, action, expected):
        """Every listed edge moves the blog to its target status."""
        blog = make_blog(AUTHOR, status=current)

        assert resolve_transition(blog, action, actor_for(action)) == expected

    def test_every_other_pair_is_invalid(self):
        """Any (status, action) pair outside the table is rejected."""
        for current in BlogStatus:
            for action in ModerationAction:
                if (current, action) in TRANSITIONS:
                    continue
                blog = make_blog(AUTHOR, status=current)
                with pytest.raises(InvalidTransitionError):
                    resolve_transition(blog, action, actor_for(action))

    def test_same_state_transition_is_invalid(self):
        """Hiding an already hidden blog is not an edge."""
        blog = make_blog(AUTHOR, status=BlogStatus.HIDDEN)

        with pytest.raises(InvalidTransitionError, match="hidden"):
            resolve_transition(blog, ModerationAction.HIDE, MODERATOR)

    def test_no_edge_leads_back_to_draft(self):
        """Once submitted, a blog never returns to draft."""
        assert BlogStatus.DRAFT not in TRANSITIONS.values()

    @pytest.mark.parametrize(
        "action",
        [
            ModerationAction.APPROVE,
            ModerationAction.REJECT,
            ModerationAction.HIDE,
            ModerationAction.UNHIDE,
        ],
    )
    def test_moderator_actions_forbidden_for_regular_user(self, action):
        """Even the author can't approve, reject, hide or unhide."""
        blog = make_blog(AUTHOR, status=BlogStatus.PENDING)

        with pytest.raises(ForbiddenError):
            resolve_transition(blog, action, Actor(user_id=AUTHOR))

    def test_authority_checked_before_edge(self):
        """A non-moderator gets Forbidden even for an invalid edge."""
        blog = make_blog(AUTHOR, status=BlogStatus.DRAFT)

        with pytest.raises(ForbiddenError):
            resolve_transition(blog, ModerationAction.HIDE, Actor(user_id=AUTHOR))

    def test_submit_only_by_author(self):
        """A moderator can't submit someone else's draft."""
        blog = make_blog(AUTHOR, status=BlogStatus.DRAFT)

        with pytest.raises(ForbiddenError):
            resolve_transition(blog, ModerationAction.SUBMIT, MODERATOR)


class TestNotificationFor:
    """Tests for notification_for."""

    def test_publishing_actions_notify_approved(self):
        assert notification_for(ModerationAction.APPROVE) == NotificationKind.APPROVED
        assert notification_for(ModerationAction.UNHIDE) == NotificationKind.APPROVED

    def test_reject_notifies_rejected(self):
        assert notification_for(ModerationAction.REJECT) == NotificationKind.REJECTED

    def test_hide_and_submit_are_silent(self):
        assert notification_for(ModerationAction.HIDE) is None
        assert notification_for(ModerationAction.SUBMIT) is None


class TestPermissions:
    """Tests for initial status, edit and delete rules."""

    @pytest.mark.parametrize("status", [BlogStatus.DRAFT, BlogStatus.PENDING])
    def test_valid_initial_statuses(self, status):
        assert validate_initial_status(status) == status

    @pytest.mark.parametrize(
        "status", [BlogStatus.PUBLISHED, BlogStatus.REJECTED, BlogStatus.HIDDEN]
    )
    def test_invalid_initial_statuses(self, status):
        with pytest.raises(ValidationError):
            validate_initial_status(status)

    def test_author_and_moderator_can_delete(self):
        blog = make_blog(AUTHOR)

        assert can_delete(blog, Actor(user_id=AUTHOR))
        assert can_delete(blog, MODERATOR)
        assert not can_delete(blog, Actor(user_id=UserId(uuid4())))

    def test_only_author_can_edit(self):
        blog = make_blog(AUTHOR)

        assert can_edit(blog, Actor(user_id=AUTHOR))
        assert not can_edit(blog, MODERATOR)
