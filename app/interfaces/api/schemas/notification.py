"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import NotificationCategory, NotificationPriority, NotificationType


class NotificationCreate(BaseModel):
    """Payload used to create a notification.

    ``recipient`` defaults to the caller; only teachers and admins may
    address someone else.
    """

    title: str = Field(..., max_length=200)
    message: str
    recipient: int | None = Field(default=None, description="Recipient user ID")
    sender: int | None = Field(default=None, description="Sender user ID")
    type: NotificationType = NotificationType.INFO
    category: NotificationCategory = NotificationCategory.SYSTEM
    priority: NotificationPriority = NotificationPriority.MEDIUM
    related_entity: str | None = Field(default=None, max_length=64)
    related_entity_type: str | None = Field(
        default=None,
        description="Assignment, Content, Class, Subject, Submission or Announcement",
    )


class NotificationUpdate(BaseModel):
    """Content fields that may be edited; recipient and sender are ignored."""

    model_config = ConfigDict(extra="allow")

    title: str | None = Field(default=None, max_length=200)
    message: str | None = None
    type: NotificationType | None = None
    category: NotificationCategory | None = None
    priority: NotificationPriority | None = None
    related_entity: str | None = Field(default=None, max_length=64)
    related_entity_type: str | None = None


class SenderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    avatar: str | None = None


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    recipient: int
    sender: SenderRead | None = None
    title: str
    message: str
    type: NotificationType
    category: NotificationCategory
    priority: NotificationPriority
    related_entity: str | None = None
    related_entity_type: str | None = None
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime


__all__ = [
    "NotificationCreate",
    "NotificationRead",
    "NotificationUpdate",
    "SenderRead",
]
