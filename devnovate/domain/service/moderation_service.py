"""Moderation domain service."""

from typing import Optional

import logfire

from devnovate.domain.error import ConflictError, NotFoundError
from devnovate.domain.model.blog import Blog
from devnovate.domain.model.moderation import notification_for, resolve_transition
from devnovate.domain.repository import BlogRepository
from devnovate.domain.value import Actor, BlogId, BlogStatus, ModerationAction

from .base import Service
from .notification_service import NotificationService


class ModerationService(Service):
    """Domain service applying moderation actions to blogs.

    A transition is validated against the stored status and then applied
    with a compare-and-set update, so two moderators racing on the same
    blog cannot both succeed.
    """

    def __init__(
        self,
        blog_repository: BlogRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize moderation service.

        Args:
            blog_repository: Blog repository
            notification_service: Notification domain service
        """
        self.blog_repository = blog_repository
        self.notification_service = notification_service

    async def apply(
        self,
        blog_id: BlogId,
        action: ModerationAction,
        actor: Actor,
        reason: Optional[str] = None,
    ) -> Blog:
        """Apply a moderation action.

        Checks run in a fixed order: the blog must exist, the actor must
        hold the authority for the action, and the action must be an edge
        from the current status.

        Args:
            blog_id: Blog ID
            action: Requested action
            actor: Caller identity
            reason: Rejection reason (only stored on reject)

        Returns:
            Updated blog

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor lacks authority
            InvalidTransitionError: If the action isn't valid from the current status
            ConflictError: If the status changed concurrently
        """
        with logfire.span(
            "moderation_service.apply",
            blog_id=str(blog_id),
            action=action.value,
            user_id=str(actor.user_id),
        ):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Moderation on non-existent blog", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))

            new_status = resolve_transition(blog, action, actor)

            rejection_reason = None
            if new_status == BlogStatus.REJECTED and reason and reason.strip():
                rejection_reason = reason.strip()

            updated = await self.blog_repository.transition_status(
                blog_id,
                expected=blog.status,
                new_status=new_status,
                rejection_reason=rejection_reason,
            )
            if updated is None:
                logfire.warn(
                    "Moderation lost a concurrent update",
                    blog_id=str(blog_id),
                    expected=blog.status.value,
                )
                raise ConflictError(
                    f"Blog {blog_id} changed while applying '{action.value}', retry"
                )

            logfire.info(
                "Blog status changed",
                blog_id=str(blog_id),
                from_status=blog.status.value,
                to_status=updated.status.value,
                action=action.value,
            )

            if notification_for(action):
                await self.notification_service.schedule_blog_status_changed(updated)

            return updated
