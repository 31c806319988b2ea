"""Notification use cases exercised against an in-memory store."""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from app.application.use_cases.notifications import (
    clear_notifications,
    create_notification,
    delete_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    update_notification,
)
from app.domain.entities import Actor, Notification, NotificationDraft, Role
from app.domain.exceptions import ForbiddenError, InvalidNotificationError, NotFoundError
from app.domain.filters import Filter, FilterOperator


class InMemoryNotificationStore:
    """Dictionary backed stand-in for the notification store."""

    def __init__(self) -> None:
        self.items: dict[int, Notification] = {}
        self._next_id = 1

    def _matches(self, notification: Notification, filters: Sequence[Filter]) -> bool:
        for condition in filters:
            value = getattr(notification, condition.field)
            if condition.operator is FilterOperator.EQ and value != condition.value:
                return False
            if condition.operator is FilterOperator.NE and value == condition.value:
                return False
            if condition.operator is FilterOperator.IN and value not in condition.value:
                return False
        return True

    def find(self, filters: Sequence[Filter]) -> list[Notification]:
        matches = [n for n in self.items.values() if self._matches(n, filters)]
        return sorted(matches, key=lambda n: (n.created_at, n.id), reverse=True)

    def find_by_id(self, notification_id: int) -> Notification | None:
        return self.items.get(notification_id)

    def insert(self, notification: Notification) -> Notification:
        saved = replace(notification, id=self._next_id)
        self.items[saved.id] = saved
        self._next_id += 1
        return saved

    def update_by_id(self, notification_id: int, patch: Mapping[str, Any]) -> Notification | None:
        current = self.items.get(notification_id)
        if current is None:
            return None
        self.items[notification_id] = replace(current, **patch)
        return self.items[notification_id]

    def update_many(self, filters: Sequence[Filter], patch: Mapping[str, Any]) -> int:
        matches = [n for n in self.items.values() if self._matches(n, filters)]
        for notification in matches:
            self.items[notification.id] = replace(notification, **patch)
        return len(matches)

    def delete_by_id(self, notification_id: int) -> None:
        self.items.pop(notification_id, None)

    def delete_many(self, filters: Sequence[Filter]) -> int:
        matches = [n.id for n in self.items.values() if self._matches(n, filters)]
        for notification_id in matches:
            del self.items[notification_id]
        return len(matches)


U1 = Actor(id=1, role=Role.STUDENT)
U2 = Actor(id=2, role=Role.STUDENT)
TEACHER = Actor(id=3, role=Role.TEACHER)


class FakeClock:
    def __init__(self) -> None:
        self.current = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture()
def store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore()


@pytest.fixture(autouse=True)
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    for module_name in ("create_notification", "mark_as_read"):
        module = importlib.import_module(
            f"app.application.use_cases.notifications.{module_name}"
        )
        monkeypatch.setattr(module, "now_in_app_timezone", fake)
    return fake


def _create(store, actor, **draft_values) -> Notification:
    draft_values.setdefault("title", "Grade posted")
    draft_values.setdefault("message", "Your quiz was graded")
    return create_notification(store, draft=NotificationDraft(**draft_values), actor=actor)


def test_self_notification_defaults_recipient_and_sender(store):
    notification = _create(store, U1)

    assert notification.id is not None
    assert notification.recipient_id == U1.id
    assert notification.sender_id == U1.id
    assert notification.is_read is False
    assert notification.read_at is None


def test_forbidden_creation_persists_nothing(store):
    with pytest.raises(ForbiddenError):
        _create(store, U1, recipient_id=U2.id)

    assert store.items == {}


def test_unknown_recipient_is_rejected_after_authorization(store):
    with pytest.raises(ForbiddenError):
        create_notification(
            store,
            draft=NotificationDraft(title="t", message="m", recipient_id=404),
            actor=U1,
            user_exists=lambda user_id: False,
        )
    with pytest.raises(InvalidNotificationError):
        create_notification(
            store,
            draft=NotificationDraft(title="t", message="m", recipient_id=404),
            actor=TEACHER,
            user_exists=lambda user_id: False,
        )
    assert store.items == {}


def test_unknown_sender_is_rejected(store):
    known = {U2.id, TEACHER.id}

    with pytest.raises(InvalidNotificationError, match="Sender not found with id of 404"):
        create_notification(
            store,
            draft=NotificationDraft(title="t", message="m", recipient_id=U2.id, sender_id=404),
            actor=TEACHER,
            user_exists=known.__contains__,
        )
    assert store.items == {}

    saved = create_notification(
        store,
        draft=NotificationDraft(title="t", message="m", recipient_id=U2.id),
        actor=TEACHER,
        user_exists=known.__contains__,
    )
    assert saved.sender_id == TEACHER.id


def test_list_returns_own_notifications_newest_first(store):
    created = [_create(store, U1, title=f"Note {index}") for index in range(3)]
    _create(store, TEACHER, recipient_id=U2.id)

    listed = list_notifications(store, actor=U1)

    assert [n.id for n in listed] == [n.id for n in reversed(created)]
    assert all(n.recipient_id == U1.id for n in listed)


def test_recipient_marks_teacher_notification_as_read(store, clock):
    notification = _create(store, TEACHER, recipient_id=U2.id)

    read = mark_notification_as_read(store, notification_id=notification.id, actor=U2)

    assert read.is_read is True
    assert read.read_at >= notification.created_at
    assert store.items[notification.id].is_read is True


def test_teacher_cannot_mark_someone_elses_notification(store):
    notification = _create(store, TEACHER, recipient_id=U2.id)

    with pytest.raises(ForbiddenError):
        mark_notification_as_read(store, notification_id=notification.id, actor=TEACHER)
    assert store.items[notification.id].is_read is False


def test_missing_notification_raises_not_found(store):
    with pytest.raises(NotFoundError):
        mark_notification_as_read(store, notification_id=42, actor=U1)
    with pytest.raises(NotFoundError):
        update_notification(store, notification_id=42, changes={"title": "x"}, actor=TEACHER)
    with pytest.raises(NotFoundError):
        delete_notification(store, notification_id=42, actor=TEACHER)


def test_mark_all_only_touches_own_unread(store):
    own_unread = _create(store, U1)
    own_read = _create(store, U1)
    mark_notification_as_read(store, notification_id=own_read.id, actor=U1)
    first_read_at = store.items[own_read.id].read_at
    sent_to_other = _create(store, TEACHER, recipient_id=U2.id, sender_id=U1.id)

    count = mark_all_notifications_as_read(store, actor=U1)

    assert count == 1
    assert store.items[own_unread.id].is_read is True
    assert store.items[own_read.id].read_at == first_read_at
    assert store.items[sent_to_other.id].is_read is False


def test_update_keeps_ownership(store):
    notification = _create(store, TEACHER, recipient_id=U2.id)

    updated = update_notification(
        store,
        notification_id=notification.id,
        changes={"title": "Grade changed", "recipient_id": U1.id, "sender_id": U1.id},
        actor=TEACHER,
    )

    assert updated.title == "Grade changed"
    assert updated.recipient_id == U2.id
    assert updated.sender_id == TEACHER.id


def test_update_with_only_immutable_fields_is_a_no_op(store):
    notification = _create(store, TEACHER, recipient_id=U2.id)

    unchanged = update_notification(
        store, notification_id=notification.id, changes={"recipient_id": U1.id}, actor=TEACHER
    )

    assert unchanged == notification


def test_recipient_cannot_update(store):
    notification = _create(store, TEACHER, recipient_id=U2.id)

    with pytest.raises(ForbiddenError):
        update_notification(
            store, notification_id=notification.id, changes={"title": "x"}, actor=U2
        )


def test_delete_by_sender_recipient_and_outsider(store):
    first = _create(store, TEACHER, recipient_id=U2.id)
    second = _create(store, TEACHER, recipient_id=U2.id)

    with pytest.raises(ForbiddenError):
        delete_notification(store, notification_id=first.id, actor=U1)

    delete_notification(store, notification_id=first.id, actor=U2)
    delete_notification(store, notification_id=second.id, actor=TEACHER)

    assert store.items == {}


def test_clear_only_removes_own_notifications(store):
    _create(store, U1)
    _create(store, U1)
    others = _create(store, TEACHER, recipient_id=U2.id, sender_id=U1.id)

    assert clear_notifications(store, actor=U1) == 2
    assert list(store.items) == [others.id]
