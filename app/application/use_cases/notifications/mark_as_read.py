"""Use cases for moving notifications to the read state."""

import logging

from app.domain.entities import Actor, Notification
from app.domain.policies import ensure_found, mark_as_read, read_patch, unread_filters
from app.domain.ports import NotificationStore
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def mark_notification_as_read(
    store: NotificationStore, *, notification_id: int, actor: Actor
) -> Notification:
    """Mark one notification as read; only its recipient may do so."""

    current = ensure_found(store.find_by_id(notification_id), notification_id)
    state = mark_as_read(current, actor, now=now_in_app_timezone())
    return ensure_found(store.update_by_id(notification_id, state.changes), notification_id)


def mark_all_notifications_as_read(store: NotificationStore, *, actor: Actor) -> int:
    """Mark every unread notification addressed to ``actor`` as read."""

    count = store.update_many(unread_filters(actor), read_patch(now_in_app_timezone()))
    logger.info("Marked %s notifications as read for user %s", count, actor.id)
    return count
