"""Moderation state machine for blog posts.

The allowed edges are data: (current status, action) -> new status.
Anything not listed is an invalid transition.
"""

from typing import Optional

from devnovate.domain.error import ForbiddenError, InvalidTransitionError, ValidationError
from devnovate.domain.model.blog import Blog
from devnovate.domain.value import Actor, BlogStatus, ModerationAction, NotificationKind

TRANSITIONS: dict[tuple[BlogStatus, ModerationAction], BlogStatus] = {
    (BlogStatus.DRAFT, ModerationAction.SUBMIT): BlogStatus.PENDING,
    (BlogStatus.PENDING, ModerationAction.APPROVE): BlogStatus.PUBLISHED,
    (BlogStatus.PENDING, ModerationAction.REJECT): BlogStatus.REJECTED,
    (BlogStatus.PUBLISHED, ModerationAction.HIDE): BlogStatus.HIDDEN,
    (BlogStatus.HIDDEN, ModerationAction.UNHIDE): BlogStatus.PUBLISHED,
    (BlogStatus.HIDDEN, ModerationAction.APPROVE): BlogStatus.PUBLISHED,
    (BlogStatus.REJECTED, ModerationAction.APPROVE): BlogStatus.PUBLISHED,
}

# Actions the author performs; everything else needs the moderator role
AUTHOR_ACTIONS = frozenset({ModerationAction.SUBMIT})

INITIAL_STATUSES = frozenset({BlogStatus.DRAFT, BlogStatus.PENDING})

_NOTIFICATIONS: dict[ModerationAction, NotificationKind] = {
    ModerationAction.APPROVE: NotificationKind.APPROVED,
    ModerationAction.UNHIDE: NotificationKind.APPROVED,
    ModerationAction.REJECT: NotificationKind.REJECTED,
}


def resolve_transition(
    blog: Blog, action: ModerationAction, actor: Actor
) -> BlogStatus:
    """Compute the status that `action` moves `blog` to.

    Authority is checked before the edge so that a non-moderator never
    learns anything about the current status.

    Args:
        blog: Blog in its current state
        action: Requested action
        actor: Caller identity

    Returns:
        The new status

    Raises:
        ForbiddenError: If the actor may not perform the action
        InvalidTransitionError: If the action is not valid from the current status
    """
    if action in AUTHOR_ACTIONS:
        if blog.author_id != actor.user_id:
            raise ForbiddenError(action.value, "blog", str(blog.id), str(actor.user_id))
    elif not actor.is_moderator:
        raise ForbiddenError(action.value, "blog", str(blog.id), str(actor.user_id))

    new_status = TRANSITIONS.get((blog.status, action))
    if new_status is None:
        raise InvalidTransitionError(blog.status.value, action.value)
    return new_status


def notification_for(action: ModerationAction) -> Optional[NotificationKind]:
    """Author notification triggered by a successful action, if any."""
    return _NOTIFICATIONS.get(action)


def validate_initial_status(status: BlogStatus) -> BlogStatus:
    """New blogs start as draft or pending only."""
    if status not in INITIAL_STATUSES:
        raise ValidationError(
            f"Initial status must be 'draft' or 'pending', got '{status.value}'"
        )
    return status


def can_delete(blog: Blog, actor: Actor) -> bool:
    """The owning author or any moderator may delete, in any status."""
    return blog.author_id == actor.user_id or actor.is_moderator


def can_edit(blog: Blog, actor: Actor) -> bool:
    """Only the owning author edits content."""
    return blog.author_id == actor.user_id
