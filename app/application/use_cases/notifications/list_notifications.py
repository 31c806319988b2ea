"""Use case for listing the caller's notifications."""

from app.domain.entities import Actor, Notification
from app.domain.policies import recipient_filters
from app.domain.ports import NotificationStore


def list_notifications(store: NotificationStore, *, actor: Actor) -> list[Notification]:
    """Return every notification addressed to ``actor``, newest first."""

    return store.find(recipient_filters(actor))
