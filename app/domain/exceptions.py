"""Errors raised by the domain and application layers."""


class NotificationError(Exception):
    """Base class for notification rule violations."""


class ForbiddenError(NotificationError):
    """The actor lacks the relationship or role the operation requires."""


class NotFoundError(NotificationError):
    """The referenced notification does not exist."""


class InvalidNotificationError(NotificationError):
    """A notification field failed validation."""


__all__ = [
    "ForbiddenError",
    "InvalidNotificationError",
    "NotFoundError",
    "NotificationError",
]
