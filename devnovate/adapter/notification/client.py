"""Notification webhook client.

Events are POSTed as JSON to the notification service, which renders and
sends the emails.
"""

from typing import Any, Optional

import httpx
import logfire

from devnovate.adapter.error import NotificationDeliveryError
from devnovate.domain.service.notification_service import NotificationClient


class WebhookNotificationClient(NotificationClient):
    """Base class for webhook notification clients.

    Provides type distinction for dependency injection.
    """

    pass


class HttpNotificationClient(WebhookNotificationClient):
    """Notification client posting to `{base_url}/<event>` over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize HTTP notification client.

        Args:
            base_url: Base URL of the notification service
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _post(self, event: str, payload: dict[str, Any]) -> None:
        """POST an event payload.

        Raises:
            NotificationDeliveryError: On transport errors or non-2xx responses
        """
        url = f"{self.base_url}/{event}"
        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.timeout
            ) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            logfire.error("Notification HTTP error", event=event, error=str(e))
            raise NotificationDeliveryError(f"HTTP error sending {event}: {e}")

        if response.is_error:
            logfire.error(
                "Notification rejected",
                event=event,
                status_code=response.status_code,
                error=response.text,
            )
            raise NotificationDeliveryError(
                f"Notification {event} failed: {response.status_code}"
            )

        logfire.debug("Notification delivered", event=event)

    async def send_blog_status(
        self,
        blog_id: str,
        author_id: str,
        status: str,
        blog_title: str,
        reason: Optional[str] = None,
    ) -> None:
        """Send a blog status change event."""
        payload: dict[str, Any] = {
            "blogId": blog_id,
            "authorId": author_id,
            "status": status,
            "blogTitle": blog_title,
        }
        if reason:
            payload["reason"] = reason
        await self._post("blog-status", payload)

    async def send_comment(
        self, blog_id: str, commenter_name: str, comment_content: str
    ) -> None:
        """Send a new comment event."""
        await self._post(
            "comment",
            {
                "blogId": blog_id,
                "commenterName": commenter_name,
                "commentContent": comment_content,
            },
        )

    async def send_welcome(self, email: str, user_name: str) -> None:
        """Send a welcome event."""
        await self._post("welcome", {"email": email, "userName": user_name})


class DisabledNotificationClient(WebhookNotificationClient):
    """Client used when notifications are switched off; logs and drops events."""

    async def send_blog_status(
        self,
        blog_id: str,
        author_id: str,
        status: str,
        blog_title: str,
        reason: Optional[str] = None,
    ) -> None:
        logfire.info("Notifications disabled, dropping blog status", blog_id=blog_id)

    async def send_comment(
        self, blog_id: str, commenter_name: str, comment_content: str
    ) -> None:
        logfire.info("Notifications disabled, dropping comment", blog_id=blog_id)

    async def send_welcome(self, email: str, user_name: str) -> None:
        logfire.info("Notifications disabled, dropping welcome")


class MockNotificationClient(WebhookNotificationClient):
    """Mock notification client for testing.

    Records every event instead of sending it. Set `fail` to make every
    call raise, to exercise the best-effort path.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, dict[str, Any]]] = []
        self.fail = False

    def _record(self, event: str, payload: dict[str, Any]) -> None:
        if self.fail:
            raise NotificationDeliveryError(f"Mock failure sending {event}")
        self.sent.append((event, payload))

    def events(self, event: str) -> list[dict[str, Any]]:
        """Payloads recorded for one event type."""
        return [payload for name, payload in self.sent if name == event]

    async def send_blog_status(
        self,
        blog_id: str,
        author_id: str,
        status: str,
        blog_title: str,
        reason: Optional[str] = None,
    ) -> None:
        self._record(
            "blog-status",
            {
                "blogId": blog_id,
                "authorId": author_id,
                "status": status,
                "blogTitle": blog_title,
                "reason": reason,
            },
        )

    async def send_comment(
        self, blog_id: str, commenter_name: str, comment_content: str
    ) -> None:
        self._record(
            "comment",
            {
                "blogId": blog_id,
                "commenterName": commenter_name,
                "commentContent": comment_content,
            },
        )

    async def send_welcome(self, email: str, user_name: str) -> None:
        self._record("welcome", {"email": email, "userName": user_name})
