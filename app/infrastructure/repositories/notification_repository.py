"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)
from app.domain.filters import Filter, FilterOperator
from app.infrastructure.models import NotificationModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

_COLUMNS: dict[str, Any] = {
    "id": NotificationModel.id,
    "recipient_id": NotificationModel.recipient_id,
    "sender_id": NotificationModel.sender_id,
    "title": NotificationModel.title,
    "message": NotificationModel.message,
    "type": NotificationModel.type,
    "category": NotificationModel.category,
    "priority": NotificationModel.priority,
    "related_entity_id": NotificationModel.related_entity_id,
    "related_entity_type": NotificationModel.related_entity_type,
    "is_read": NotificationModel.is_read,
    "read_at": NotificationModel.read_at,
    "created_at": NotificationModel.created_at,
}
_READ_ONLY_FIELDS = frozenset({"id", "created_at"})


class NotificationRepository:
    """SQLAlchemy implementation of :class:`~app.domain.ports.NotificationStore`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, filters: Sequence[Filter]) -> list[Notification]:
        statement = (
            select(NotificationModel)
            .where(*self._build_clauses(filters))
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in self.session.scalars(statement)]

    def find_by_id(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def insert(self, notification: Notification) -> Notification:
        model = NotificationModel()
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        self._apply_values(model, self._entity_values(notification))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_by_id(
        self, notification_id: int, patch: Mapping[str, Any]
    ) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        self._apply_values(model, patch)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_many(self, filters: Sequence[Filter], patch: Mapping[str, Any]) -> int:
        values = {
            _COLUMNS[field]: self._to_column_value(value)
            for field, value in self._checked(patch).items()
        }
        result = self.session.execute(
            update(NotificationModel)
            .where(*self._build_clauses(filters))
            .values(values)
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    def delete_by_id(self, notification_id: int) -> None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def delete_many(self, filters: Sequence[Filter]) -> int:
        result = self.session.execute(
            delete(NotificationModel)
            .where(*self._build_clauses(filters))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    @staticmethod
    def _build_clauses(filters: Sequence[Filter]) -> list[Any]:
        clauses = []
        for condition in filters:
            column = _COLUMNS.get(condition.field)
            if column is None:
                msg = f"Cannot filter notifications by '{condition.field}'"
                raise ValueError(msg)
            value = condition.value
            if condition.operator is FilterOperator.EQ:
                clauses.append(column.is_(None) if value is None else column == value)
            elif condition.operator is FilterOperator.NE:
                clauses.append(column.is_not(None) if value is None else column != value)
            elif condition.operator is FilterOperator.IN:
                clauses.append(column.in_(list(value)))
            else:  # pragma: no cover - exhaustive enum
                msg = f"Unsupported filter operator {condition.operator!r}"
                raise ValueError(msg)
        return clauses

    @staticmethod
    def _checked(patch: Mapping[str, Any]) -> Mapping[str, Any]:
        unknown = (set(patch) - set(_COLUMNS)) | (_READ_ONLY_FIELDS & set(patch))
        if unknown:
            msg = f"Cannot update notification fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return patch

    @classmethod
    def _apply_values(cls, model: NotificationModel, values: Mapping[str, Any]) -> None:
        for field, value in cls._checked(values).items():
            setattr(model, field, cls._to_column_value(value))

    @staticmethod
    def _to_column_value(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, datetime):
            return ensure_app_naive_datetime(value)
        return value

    @staticmethod
    def _entity_values(notification: Notification) -> dict[str, Any]:
        return {
            "recipient_id": notification.recipient_id,
            "sender_id": notification.sender_id,
            "title": notification.title,
            "message": notification.message,
            "type": notification.type,
            "category": notification.category,
            "priority": notification.priority,
            "related_entity_id": notification.related_entity_id,
            "related_entity_type": notification.related_entity_type,
            "is_read": notification.is_read,
            "read_at": notification.read_at,
        }

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            sender_id=model.sender_id,
            title=model.title,
            message=model.message,
            type=NotificationType(model.type),
            category=NotificationCategory(model.category),
            priority=NotificationPriority(model.priority),
            related_entity_id=model.related_entity_id,
            related_entity_type=model.related_entity_type,
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
