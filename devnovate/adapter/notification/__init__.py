"""Notification webhook adapter."""

from .client import (
    DisabledNotificationClient,
    HttpNotificationClient,
    MockNotificationClient,
    WebhookNotificationClient,
)

__all__ = [
    "DisabledNotificationClient",
    "HttpNotificationClient",
    "MockNotificationClient",
    "WebhookNotificationClient",
]
