"""Notification domain service.

Notifications are best-effort side effects: a failed delivery is logged
and never fails the operation that triggered it. The `schedule_*` methods
hold delivery until the request's transaction has committed.
"""

from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, Optional

import logfire

from devnovate.domain.model.blog import Blog
from devnovate.domain.model.comment import Comment
from devnovate.domain.model.user import User
from devnovate.domain.repository import AfterCommit
from devnovate.domain.value import BlogStatus

from .base import Service


class NotificationClient:
    """Outbound notification interface.

    Implementations deliver events to the notification collaborator
    (email sender, webhook, etc.).
    """

    async def send_blog_status(
        self,
        blog_id: str,
        author_id: str,
        status: str,
        blog_title: str,
        reason: Optional[str] = None,
    ) -> None:
        """Tell an author their post was published or rejected."""
        raise NotImplementedError

    async def send_comment(
        self, blog_id: str, commenter_name: str, comment_content: str
    ) -> None:
        """Tell an author someone commented on their post."""
        raise NotImplementedError

    async def send_welcome(self, email: str, user_name: str) -> None:
        """Greet a newly registered user."""
        raise NotImplementedError


class NotificationService(Service):
    """Domain service wrapping the notification client.

    Every method swallows delivery errors after logging them.
    """

    def __init__(
        self, client: NotificationClient, after_commit: Optional[AfterCommit] = None
    ) -> None:
        """Initialize notification service.

        Args:
            client: Notification client implementation
            after_commit: Queue run after the request commits; without one,
                scheduled notifications are delivered immediately
        """
        self.client = client
        self.after_commit = after_commit

    async def _schedule(self, send: Callable[..., Awaitable[bool]], *args: Any) -> None:
        if self.after_commit is None:
            await send(*args)
        else:
            self.after_commit.add(partial(send, *args))

    async def schedule_blog_status_changed(self, blog: Blog) -> None:
        """Queue `blog_status_changed` for after the commit."""
        await self._schedule(self.blog_status_changed, blog)

    async def schedule_comment_added(self, blog: Blog, comment: Comment) -> None:
        """Queue `comment_added` for after the commit."""
        await self._schedule(self.comment_added, blog, comment)

    async def schedule_user_registered(self, user: User) -> None:
        """Queue `user_registered` for after the commit."""
        await self._schedule(self.user_registered, user)

    async def blog_status_changed(self, blog: Blog) -> bool:
        """Notify the author of a published or rejected post.

        Args:
            blog: Blog after the transition

        Returns:
            True if the notification was delivered
        """
        if blog.status not in (BlogStatus.PUBLISHED, BlogStatus.REJECTED):
            return False

        with logfire.span(
            "notification_service.blog_status_changed",
            blog_id=str(blog.id),
            status=blog.status.value,
        ):
            try:
                await self.client.send_blog_status(
                    blog_id=str(blog.id),
                    author_id=str(blog.author_id),
                    status=blog.status.value,
                    blog_title=blog.title,
                    reason=blog.rejection_reason,
                )
            except Exception as e:
                logfire.warn(
                    "Failed to send blog status notification",
                    blog_id=str(blog.id),
                    error=str(e),
                )
                return False

            logfire.info("Blog status notification sent", blog_id=str(blog.id))
            return True

    async def comment_added(self, blog: Blog, comment: Comment) -> bool:
        """Notify a post author of a new comment.

        Skipped when the commenter is the author.

        Returns:
            True if the notification was delivered
        """
        if comment.author_id == blog.author_id:
            return False

        with logfire.span(
            "notification_service.comment_added",
            blog_id=str(blog.id),
            comment_id=str(comment.id),
        ):
            try:
                await self.client.send_comment(
                    blog_id=str(blog.id),
                    commenter_name=comment.author.display_name,
                    comment_content=comment.content,
                )
            except Exception as e:
                logfire.warn(
                    "Failed to send comment notification",
                    blog_id=str(blog.id),
                    error=str(e),
                )
                return False

            logfire.info("Comment notification sent", blog_id=str(blog.id))
            return True

    async def user_registered(self, user: User) -> bool:
        """Send the welcome message to a new user."""
        with logfire.span("notification_service.user_registered", user_id=str(user.id)):
            try:
                await self.client.send_welcome(
                    email=user.email, user_name=user.display_name
                )
            except Exception as e:
                logfire.warn(
                    "Failed to send welcome notification",
                    user_id=str(user.id),
                    error=str(e),
                )
                return False

            logfire.info("Welcome notification sent", user_id=str(user.id))
            return True
