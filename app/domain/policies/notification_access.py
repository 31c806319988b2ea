"""Access and lifecycle rules for notifications.

Every function here is pure: it receives the actor, the current snapshot of
the notification (when one exists) and the clock reading, and either raises
:class:`~app.domain.exceptions.ForbiddenError` or returns the resulting state.
Persistence is left to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Final

from app.domain.entities import (
    RELATED_ENTITY_TYPES,
    Actor,
    Notification,
    NotificationCategory,
    NotificationDraft,
    NotificationPriority,
    NotificationType,
    Role,
)
from app.domain.exceptions import (
    ForbiddenError,
    InvalidNotificationError,
    NotFoundError,
)
from app.domain.filters import Filter

PRIVILEGED_ROLES: Final[frozenset[Role]] = frozenset({Role.TEACHER, Role.ADMIN})

IMMUTABLE_FIELDS: Final[frozenset[str]] = frozenset(
    {"recipient_id", "sender_id", "recipient", "sender"}
)
UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "title",
        "message",
        "type",
        "category",
        "priority",
        "related_entity_id",
        "related_entity_type",
    }
)


class NotificationOperation(str, Enum):
    """Operations subject to ownership checks."""

    CREATE_FOR_OTHERS = "create_for_others"
    UPDATE = "update"
    MARK_AS_READ = "mark_as_read"
    DELETE = "delete"


# Operations whose ownership check a privileged role may skip. Marking as read
# is intentionally absent: only the recipient may ever do it.
_OWNERSHIP_BYPASS: Final[frozenset[NotificationOperation]] = frozenset(
    {
        NotificationOperation.CREATE_FOR_OTHERS,
        NotificationOperation.UPDATE,
        NotificationOperation.DELETE,
    }
)


@dataclass(frozen=True)
class StateChange:
    """Resulting notification plus the fields that must be persisted."""

    notification: Notification
    changes: Mapping[str, Any]


def is_privileged(role: Role | str) -> bool:
    """Return ``True`` for roles exempt from some ownership checks."""

    try:
        return Role(role) in PRIVILEGED_ROLES
    except ValueError:
        return False


def can_bypass_ownership(operation: NotificationOperation, role: Role | str) -> bool:
    """Return ``True`` when ``role`` may perform ``operation`` on anyone's data."""

    return operation in _OWNERSHIP_BYPASS and is_privileged(role)


def ensure_found(notification: Notification | None, notification_id: int) -> Notification:
    """Return ``notification`` or raise :class:`NotFoundError`."""

    if notification is None:
        raise NotFoundError(f"Notification not found with id of {notification_id}")
    return notification


def authorize_creation(
    draft: NotificationDraft, actor: Actor, *, now: datetime
) -> Notification:
    """Return the notification ``actor`` is allowed to create from ``draft``."""

    recipient_id = draft.recipient_id if draft.recipient_id is not None else actor.id
    if recipient_id != actor.id and not can_bypass_ownership(
        NotificationOperation.CREATE_FOR_OTHERS, actor.role
    ):
        raise ForbiddenError("Not authorized to create notifications for other users")

    sender_id = draft.sender_id if draft.sender_id is not None else actor.id
    related_entity_id, related_entity_type = _validate_related_entity(
        draft.related_entity_id, draft.related_entity_type
    )
    return Notification(
        id=None,
        recipient_id=recipient_id,
        sender_id=sender_id,
        title=_validate_text("title", draft.title),
        message=_validate_text("message", draft.message),
        type=_coerce_enum(NotificationType, "type", draft.type),
        category=_coerce_enum(NotificationCategory, "category", draft.category),
        priority=_coerce_enum(NotificationPriority, "priority", draft.priority),
        related_entity_id=related_entity_id,
        related_entity_type=related_entity_type,
        is_read=False,
        read_at=None,
        created_at=now,
    )


def authorize_update(
    existing: Notification, changes: Mapping[str, Any], actor: Actor
) -> StateChange:
    """Merge ``changes`` into ``existing`` when ``actor`` is allowed to."""

    is_sender = existing.sender_id is not None and existing.sender_id == actor.id
    if not is_sender and not can_bypass_ownership(
        NotificationOperation.UPDATE, actor.role
    ):
        raise ForbiddenError("Not authorized to update this notification")

    remaining = {
        key: value for key, value in changes.items() if key not in IMMUTABLE_FIELDS
    }
    unknown = sorted(set(remaining) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidNotificationError(
            f"Fields cannot be updated: {', '.join(unknown)}"
        )

    validated: dict[str, Any] = {}
    if "title" in remaining:
        validated["title"] = _validate_text("title", remaining["title"])
    if "message" in remaining:
        validated["message"] = _validate_text("message", remaining["message"])
    if "type" in remaining:
        validated["type"] = _coerce_enum(NotificationType, "type", remaining["type"])
    if "category" in remaining:
        validated["category"] = _coerce_enum(
            NotificationCategory, "category", remaining["category"]
        )
    if "priority" in remaining:
        validated["priority"] = _coerce_enum(
            NotificationPriority, "priority", remaining["priority"]
        )
    if "related_entity_id" in remaining or "related_entity_type" in remaining:
        entity_id, entity_type = _validate_related_entity(
            remaining.get("related_entity_id", existing.related_entity_id),
            remaining.get("related_entity_type", existing.related_entity_type),
        )
        validated["related_entity_id"] = entity_id
        validated["related_entity_type"] = entity_type

    return StateChange(notification=replace(existing, **validated), changes=validated)


def ensure_can_mark_as_read(existing: Notification, actor: Actor) -> None:
    """Only the recipient may mark a notification as read, whatever the role."""

    if existing.recipient_id != actor.id:
        raise ForbiddenError("Not authorized to update this notification")


def mark_as_read(existing: Notification, actor: Actor, *, now: datetime) -> StateChange:
    """Return the read state of ``existing``.

    Reading an already read notification stamps ``read_at`` again.
    """

    ensure_can_mark_as_read(existing, actor)
    changes = read_patch(now)
    return StateChange(notification=replace(existing, **changes), changes=changes)


def ensure_can_delete(existing: Notification, actor: Actor) -> None:
    """Recipient, sender and privileged roles may delete a notification."""

    if existing.recipient_id == actor.id:
        return
    if existing.sender_id is not None and existing.sender_id == actor.id:
        return
    if can_bypass_ownership(NotificationOperation.DELETE, actor.role):
        return
    raise ForbiddenError("Not authorized to delete this notification")


def read_patch(now: datetime) -> dict[str, Any]:
    return {"is_read": True, "read_at": now}


def recipient_filters(actor: Actor) -> list[Filter]:
    """Filters selecting every notification owned by ``actor``."""

    return [Filter.eq("recipient_id", actor.id)]


def unread_filters(actor: Actor) -> list[Filter]:
    return [*recipient_filters(actor), Filter.eq("is_read", False)]


def _validate_text(field_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidNotificationError(f"Please add a {field_name}")
    return value.strip()


def _coerce_enum(enum_cls: type[Enum], field_name: str, value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidNotificationError(
            f"'{value}' is not a valid {field_name}; expected one of: {allowed}"
        ) from exc


def _validate_related_entity(
    entity_id: str | None, entity_type: str | None
) -> tuple[str | None, str | None]:
    if entity_id is None and entity_type is None:
        return None, None
    if entity_id is None or entity_type is None:
        raise InvalidNotificationError(
            "related_entity and related_entity_type must be provided together"
        )
    if entity_type not in RELATED_ENTITY_TYPES:
        allowed = ", ".join(sorted(RELATED_ENTITY_TYPES))
        raise InvalidNotificationError(
            f"'{entity_type}' is not a valid related_entity_type; expected one of: {allowed}"
        )
    return str(entity_id), entity_type
