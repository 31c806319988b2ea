"""Tests for the authentication token endpoint."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from app.application.use_cases.users import create_user
from app.domain.entities import Role
from app.infrastructure.security import decode_access_token


@pytest.fixture()
def teacher(db_session):
    return create_user(
        db_session,
        first_name="Grace",
        last_name="Hopper",
        email="Grace@Example.com",
        password="Secret123",
        role=Role.TEACHER,
    )


def _login(client, email: str, password: str):
    return client.post("/api/auth/token", data={"username": email, "password": password})


def test_login_returns_bearer_token(client, teacher):
    response = _login(client, "grace@example.com", "Secret123")

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "teacher"
    claims = decode_access_token(body["access_token"])
    assert claims["sub"] == "grace@example.com"
    assert claims["role"] == "teacher"


def test_token_identifies_the_caller(client, teacher):
    token = _login(client, "grace@example.com", "Secret123").json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == teacher.id
    assert data["role"] == "teacher"
    assert "password" not in data


def test_wrong_password_is_rejected(client, teacher):
    response = _login(client, "grace@example.com", "wrong")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_tampered_token_is_rejected(client, teacher):
    token = _login(client, "grace@example.com", "Secret123").json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}x"})

    assert response.status_code == 401


def test_duplicate_email_is_refused(db_session, teacher):
    with pytest.raises(ValueError):
        create_user(
            db_session,
            first_name="Other",
            last_name="Person",
            email="grace@example.com",
            password="Secret123",
        )
