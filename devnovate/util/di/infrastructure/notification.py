"""Notification infrastructure providers."""

from dishka import Scope, provide

from devnovate.adapter.notification.client import (
    DisabledNotificationClient,
    HttpNotificationClient,
)
from devnovate.config import NotificationSettings
from devnovate.domain.service.notification_service import NotificationClient
from devnovate.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_client(
        self, settings: NotificationSettings
    ) -> NotificationClient:
        """Provide notification client.

        Returns:
            HTTP webhook client, or a dropping client when disabled
        """
        if not settings.enabled:
            return DisabledNotificationClient()

        return HttpNotificationClient(
            base_url=settings.base_url, timeout=settings.timeout_seconds
        )
