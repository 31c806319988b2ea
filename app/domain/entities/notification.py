"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Visual severity of a notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationCategory(str, Enum):
    """Learning-platform area a notification originates from."""

    ASSIGNMENT = "assignment"
    SUBMISSION = "submission"
    GRADE = "grade"
    MESSAGE = "message"
    SYSTEM = "system"
    ENROLLMENT = "enrollment"
    CONTENT = "content"


class NotificationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


RELATED_ENTITY_TYPES: frozenset[str] = frozenset(
    {"Assignment", "Content", "Class", "Subject", "Submission", "Announcement"}
)


@dataclass
class Notification:
    """Information message delivered to a single recipient.

    ``sender_id`` is ``None`` for system-generated notifications. ``read_at``
    is set if and only if ``is_read`` is ``True``.
    """

    id: int | None
    recipient_id: int
    title: str
    message: str
    sender_id: int | None = None
    type: NotificationType = NotificationType.INFO
    category: NotificationCategory = NotificationCategory.SYSTEM
    priority: NotificationPriority = NotificationPriority.MEDIUM
    related_entity_id: str | None = None
    related_entity_type: str | None = None
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None


@dataclass
class NotificationDraft:
    """Caller supplied values used to create a notification."""

    title: str
    message: str
    recipient_id: int | None = None
    sender_id: int | None = None
    type: NotificationType | str = NotificationType.INFO
    category: NotificationCategory | str = NotificationCategory.SYSTEM
    priority: NotificationPriority | str = NotificationPriority.MEDIUM
    related_entity_id: str | None = None
    related_entity_type: str | None = None


@dataclass(frozen=True)
class SenderSummary:
    """Subset of the sender profile embedded in notification responses."""

    id: int
    first_name: str
    last_name: str
    avatar: str | None = None


__all__ = [
    "Notification",
    "NotificationCategory",
    "NotificationDraft",
    "NotificationPriority",
    "NotificationType",
    "RELATED_ENTITY_TYPES",
    "SenderSummary",
]
