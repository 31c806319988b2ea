"""Shared fixtures: a throwaway SQLite database and authenticated users."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["ENVIRONMENT"] = "test"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import Role, User  # noqa: E402
from app.infrastructure import database  # noqa: E402
from app.infrastructure.repositories import UserRepository  # noqa: E402
from app.infrastructure.security import create_user_access_token  # noqa: E402


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    from app.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture(scope="session", autouse=True)
def _remove_test_database():
    yield
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def make_user(db_session):
    """Persist a user with the given role; the password hash is a placeholder."""

    counter = {"value": 0}

    def _make_user(
        role: Role = Role.STUDENT,
        *,
        first_name: str = "Test",
        last_name: str = "User",
        is_active: bool = True,
    ) -> User:
        counter["value"] += 1
        user = User(
            id=None,
            role=role,
            first_name=first_name,
            last_name=last_name,
            email=f"{role.value}{counter['value']}@example.com",
            password=f"placeholder-hash-{counter['value']}",
            avatar=None,
            is_active=is_active,
            created_at=None,
        )
        return UserRepository(db_session).create(user)

    return _make_user


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_access_token(user)}"}


@pytest.fixture()
def headers_for():
    return auth_headers
