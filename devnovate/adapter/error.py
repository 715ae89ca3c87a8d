"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NotificationDeliveryError(AdapterError):
    """The notification collaborator rejected or never received an event."""

    pass
