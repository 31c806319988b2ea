"""Use cases for the notification lifecycle."""

from .create_notification import create_notification
from .delete_notification import clear_notifications, delete_notification
from .list_notifications import list_notifications
from .mark_as_read import mark_all_notifications_as_read, mark_notification_as_read
from .update_notification import update_notification

__all__ = [
    "clear_notifications",
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "update_notification",
]
