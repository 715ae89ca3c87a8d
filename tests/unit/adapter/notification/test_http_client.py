"""Unit tests for HttpNotificationClient."""

import json

import httpx
import pytest

from devnovate.adapter.error import NotificationDeliveryError
from devnovate.adapter.notification import HttpNotificationClient


def recording_transport(requests: list[httpx.Request], status_code: int = 200):
    """Mock transport that records requests and answers with `status_code`."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json={"ok": status_code < 400})

    return httpx.MockTransport(handler)


class TestHttpNotificationClient:
    """Tests for the webhook payloads and error handling."""

    @pytest.mark.asyncio
    async def test_blog_status_payload(self):
        requests: list[httpx.Request] = []
        client = HttpNotificationClient(
            "https://devnovate.test/api/notifications/",
            transport=recording_transport(requests),
        )

        await client.send_blog_status(
            blog_id="b1",
            author_id="u1",
            status="rejected",
            blog_title="Draft",
            reason="Too short",
        )

        [request] = requests
        assert request.method == "POST"
        assert str(request.url) == "https://devnovate.test/api/notifications/blog-status"
        assert json.loads(request.content) == {
            "blogId": "b1",
            "authorId": "u1",
            "status": "rejected",
            "blogTitle": "Draft",
            "reason": "Too short",
        }

    @pytest.mark.asyncio
    async def test_reason_omitted_when_absent(self):
        requests: list[httpx.Request] = []
        client = HttpNotificationClient(
            "https://devnovate.test/api/notifications",
            transport=recording_transport(requests),
        )

        await client.send_blog_status("b1", "u1", "published", "Done")

        assert "reason" not in json.loads(requests[0].content)

    @pytest.mark.asyncio
    async def test_comment_and_welcome_events(self):
        requests: list[httpx.Request] = []
        client = HttpNotificationClient(
            "https://devnovate.test/api/notifications",
            transport=recording_transport(requests),
        )

        await client.send_comment("b1", "Linus", "Nice")
        await client.send_welcome("ada@example.com", "Ada")

        assert [r.url.path for r in requests] == [
            "/api/notifications/comment",
            "/api/notifications/welcome",
        ]
        assert json.loads(requests[1].content) == {
            "email": "ada@example.com",
            "userName": "Ada",
        }

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = HttpNotificationClient(
            "https://devnovate.test/api/notifications",
            transport=recording_transport([], status_code=502),
        )

        with pytest.raises(NotificationDeliveryError, match="502"):
            await client.send_welcome("ada@example.com", "Ada")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpNotificationClient(
            "https://devnovate.test/api/notifications",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(NotificationDeliveryError, match="HTTP error"):
            await client.send_comment("b1", "Linus", "Nice")
