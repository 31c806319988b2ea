"""Use cases for removing notifications."""

import logging

from app.domain.entities import Actor
from app.domain.exceptions import ForbiddenError
from app.domain.policies import ensure_can_delete, ensure_found, recipient_filters
from app.domain.ports import NotificationStore

logger = logging.getLogger(__name__)


def delete_notification(
    store: NotificationStore, *, notification_id: int, actor: Actor
) -> None:
    """Delete a notification as its recipient, its sender or a privileged user."""

    current = ensure_found(store.find_by_id(notification_id), notification_id)
    try:
        ensure_can_delete(current, actor)
    except ForbiddenError:
        logger.warning(
            "User %s (%s) is not allowed to delete notification %s",
            actor.id,
            actor.role.value,
            notification_id,
        )
        raise
    store.delete_by_id(notification_id)
    logger.info("Notification %s deleted by user %s", notification_id, actor.id)


def clear_notifications(store: NotificationStore, *, actor: Actor) -> int:
    """Delete every notification addressed to ``actor``."""

    count = store.delete_many(recipient_filters(actor))
    logger.info("Cleared %s notifications for user %s", count, actor.id)
    return count
