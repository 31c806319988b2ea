"""Interfaces the domain expects from its collaborators."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Notification
from .filters import Filter


class NotificationStore(Protocol):
    """Narrow persistence contract required by the notification use cases."""

    def find(self, filters: Sequence[Filter]) -> list[Notification]:
        """Return matches ordered by ``created_at`` descending."""

    def find_by_id(self, notification_id: int) -> Notification | None:
        ...

    def insert(self, notification: Notification) -> Notification:
        ...

    def update_by_id(
        self, notification_id: int, patch: Mapping[str, Any]
    ) -> Notification | None:
        ...

    def update_many(self, filters: Sequence[Filter], patch: Mapping[str, Any]) -> int:
        ...

    def delete_by_id(self, notification_id: int) -> None:
        ...

    def delete_many(self, filters: Sequence[Filter]) -> int:
        ...


__all__ = ["NotificationStore"]
