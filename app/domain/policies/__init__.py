"""Authorization and lifecycle policies for domain entities."""

from .notification_access import (
    IMMUTABLE_FIELDS,
    UPDATABLE_FIELDS,
    NotificationOperation,
    StateChange,
    authorize_creation,
    authorize_update,
    can_bypass_ownership,
    ensure_can_delete,
    ensure_can_mark_as_read,
    ensure_found,
    is_privileged,
    mark_as_read,
    read_patch,
    recipient_filters,
    unread_filters,
)

__all__ = [
    "IMMUTABLE_FIELDS",
    "UPDATABLE_FIELDS",
    "NotificationOperation",
    "StateChange",
    "authorize_creation",
    "authorize_update",
    "can_bypass_ownership",
    "ensure_can_delete",
    "ensure_can_mark_as_read",
    "ensure_found",
    "is_privileged",
    "mark_as_read",
    "read_patch",
    "recipient_filters",
    "unread_filters",
]
