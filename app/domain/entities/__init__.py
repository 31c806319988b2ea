"""Domain entities exposed by the application."""

from .actor import Actor
from .notification import (
    RELATED_ENTITY_TYPES,
    Notification,
    NotificationCategory,
    NotificationDraft,
    NotificationPriority,
    NotificationType,
    SenderSummary,
)
from .role import Role
from .user import User

__all__ = [
    "Actor",
    "Notification",
    "NotificationCategory",
    "NotificationDraft",
    "NotificationPriority",
    "NotificationType",
    "RELATED_ENTITY_TYPES",
    "Role",
    "SenderSummary",
    "User",
]
