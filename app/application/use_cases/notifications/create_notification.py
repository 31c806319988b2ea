"""Use case for creating notifications."""

import logging
from collections.abc import Callable

from app.domain.entities import Actor, Notification, NotificationDraft
from app.domain.exceptions import ForbiddenError, InvalidNotificationError
from app.domain.policies import authorize_creation
from app.domain.ports import NotificationStore
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    store: NotificationStore,
    *,
    draft: NotificationDraft,
    actor: Actor,
    user_exists: Callable[[int], bool] | None = None,
) -> Notification:
    """Create a notification for ``actor`` or, when privileged, for another user.

    ``user_exists`` is consulted for the recipient and the sender only after
    the actor has been authorized, so unprivileged callers cannot probe for
    user identifiers.
    """

    try:
        notification = authorize_creation(draft, actor, now=now_in_app_timezone())
    except ForbiddenError:
        logger.warning(
            "User %s (%s) attempted to notify user %s",
            actor.id,
            actor.role.value,
            draft.recipient_id,
        )
        raise

    if user_exists is not None:
        for label, user_id in (
            ("Recipient", notification.recipient_id),
            ("Sender", notification.sender_id),
        ):
            if user_id is not None and user_id != actor.id and not user_exists(user_id):
                raise InvalidNotificationError(f"{label} not found with id of {user_id}")

    saved = store.insert(notification)
    logger.info(
        "Notification %s created by user %s for user %s",
        saved.id,
        actor.id,
        saved.recipient_id,
    )
    return saved
