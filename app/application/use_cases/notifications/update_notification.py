"""Use case for editing notification content."""

import logging
from collections.abc import Mapping
from typing import Any

from app.domain.entities import Actor, Notification
from app.domain.policies import authorize_update, ensure_found
from app.domain.ports import NotificationStore

logger = logging.getLogger(__name__)


def update_notification(
    store: NotificationStore,
    *,
    notification_id: int,
    changes: Mapping[str, Any],
    actor: Actor,
) -> Notification:
    """Apply ``changes`` to a notification sent by ``actor`` (or any, if privileged).

    Recipient and sender are silently kept as they are.
    """

    current = ensure_found(store.find_by_id(notification_id), notification_id)
    state = authorize_update(current, changes, actor)
    if not state.changes:
        return current

    updated = store.update_by_id(notification_id, state.changes)
    notification = ensure_found(updated, notification_id)
    logger.info(
        "Notification %s updated by user %s (%s)",
        notification_id,
        actor.id,
        ", ".join(sorted(state.changes)),
    )
    return notification
