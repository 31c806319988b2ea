"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import Role, SenderSummary, User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide lookup and creation of user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.scalars(
            select(UserModel).where(UserModel.email == email.lower())
        ).first()
        return self._to_entity(model) if model else None

    def exists(self, user_id: int) -> bool:
        return self.session.get(UserModel, user_id) is not None

    def list_summaries(self, user_ids: Iterable[int]) -> dict[int, SenderSummary]:
        """Return sender summaries keyed by user id for the given ``user_ids``."""

        ids = {user_id for user_id in user_ids if user_id is not None}
        if not ids:
            return {}
        models = self.session.scalars(select(UserModel).where(UserModel.id.in_(ids)))
        return {
            model.id: SenderSummary(
                id=model.id,
                first_name=model.first_name,
                last_name=model.last_name,
                avatar=model.avatar,
            )
            for model in models
        }

    def create(self, user: User) -> User:
        model = UserModel(
            role=Role(user.role).value,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.lower(),
            password=user.password,
            avatar=user.avatar,
            is_active=user.is_active,
        )
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=Role(model.role),
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password=model.password,
            avatar=model.avatar,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
