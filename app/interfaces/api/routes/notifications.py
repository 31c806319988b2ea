"""Endpoints for reading and managing user notifications."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    clear_notifications as clear_notifications_uc,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read as mark_all_notifications_as_read_uc,
    mark_notification_as_read as mark_notification_as_read_uc,
    update_notification as update_notification_uc,
)
from app.domain.entities import Actor, Notification, NotificationDraft, SenderSummary
from app.domain.exceptions import NotificationError
from app.infrastructure.database import get_db
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.interfaces.api.dependencies import get_current_actor, get_notification_store
from app.interfaces.api.errors import to_http_exception
from app.interfaces.api.schemas import (
    EmptyDataResponse,
    ErrorResponse,
    MessageResponse,
    NotificationCreate,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    NotificationUpdate,
    SenderRead,
)

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid payload"},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Not authorized"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Not found"},
}

# API field name -> domain field name
_FIELD_ALIASES = {
    "recipient": "recipient_id",
    "sender": "sender_id",
    "related_entity": "related_entity_id",
}


def _to_schema(
    notification: Notification, senders: dict[int, SenderSummary]
) -> NotificationRead:
    summary = senders.get(notification.sender_id) if notification.sender_id else None
    return NotificationRead(
        id=notification.id or 0,
        recipient=notification.recipient_id,
        sender=SenderRead.model_validate(summary) if summary is not None else None,
        title=notification.title,
        message=notification.message,
        type=notification.type,
        category=notification.category,
        priority=notification.priority,
        related_entity=notification.related_entity_id,
        related_entity_type=notification.related_entity_type,
        is_read=notification.is_read,
        read_at=notification.read_at,
        created_at=notification.created_at,
    )


def _populate(db: Session, notifications: Sequence[Notification]) -> list[NotificationRead]:
    """Embed sender summaries in place of bare sender ids."""

    senders = UserRepository(db).list_summaries(n.sender_id for n in notifications)
    return [_to_schema(notification, senders) for notification in notifications]


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    db: Session = Depends(get_db),
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> NotificationListResponse:
    """Return every notification addressed to the caller, newest first."""

    notifications = list_notifications_uc(store, actor=actor)
    return NotificationListResponse(
        count=len(notifications), data=_populate(db, notifications)
    )


@router.post(
    "",
    response_model=NotificationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> NotificationResponse:
    """Create a notification.

    Admins and teachers can create notifications for any user, everyone else
    only for themselves.
    """

    draft = NotificationDraft(
        title=payload.title,
        message=payload.message,
        recipient_id=payload.recipient,
        sender_id=payload.sender,
        type=payload.type,
        category=payload.category,
        priority=payload.priority,
        related_entity_id=payload.related_entity,
        related_entity_type=payload.related_entity_type,
    )
    try:
        notification = create_notification_uc(
            store,
            draft=draft,
            actor=actor,
            user_exists=UserRepository(db).exists,
        )
    except NotificationError as exc:
        raise to_http_exception(exc) from exc
    return NotificationResponse(data=_populate(db, [notification])[0])


@router.delete("", response_model=MessageResponse)
def clear_notifications(
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> MessageResponse:
    """Delete every notification addressed to the caller."""

    clear_notifications_uc(store, actor=actor)
    return MessageResponse(message="All notifications cleared")


@router.put("/read-all", response_model=MessageResponse)
def mark_all_as_read(
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> MessageResponse:
    """Mark every unread notification addressed to the caller as read."""

    mark_all_notifications_as_read_uc(store, actor=actor)
    return MessageResponse(message="All notifications marked as read")


@router.put(
    "/{notification_id}",
    response_model=NotificationResponse,
    responses=_ERROR_RESPONSES,
)
def update_notification(
    notification_id: int,
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> NotificationResponse:
    """Update a notification (admins, teachers or its sender only)."""

    changes = {
        _FIELD_ALIASES.get(key, key): value
        for key, value in payload.model_dump(exclude_unset=True).items()
    }
    try:
        notification = update_notification_uc(
            store, notification_id=notification_id, changes=changes, actor=actor
        )
    except NotificationError as exc:
        raise to_http_exception(exc) from exc
    return NotificationResponse(data=_populate(db, [notification])[0])


@router.delete(
    "/{notification_id}",
    response_model=EmptyDataResponse,
    responses=_ERROR_RESPONSES,
)
def delete_notification(
    notification_id: int,
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> EmptyDataResponse:
    """Delete a notification (admins, teachers, its recipient or its sender)."""

    try:
        delete_notification_uc(store, notification_id=notification_id, actor=actor)
    except NotificationError as exc:
        raise to_http_exception(exc) from exc
    return EmptyDataResponse()


@router.put(
    "/{notification_id}/read",
    response_model=NotificationResponse,
    responses=_ERROR_RESPONSES,
)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    store: NotificationRepository = Depends(get_notification_store),
    actor: Actor = Depends(get_current_actor),
) -> NotificationResponse:
    """Mark a notification as read; only its recipient may do so."""

    try:
        notification = mark_notification_as_read_uc(
            store, notification_id=notification_id, actor=actor
        )
    except NotificationError as exc:
        raise to_http_exception(exc) from exc
    return NotificationResponse(data=_populate(db, [notification])[0])
