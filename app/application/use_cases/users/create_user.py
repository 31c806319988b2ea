"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import Role, User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    role: Role | str = Role.STUDENT,
    avatar: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ValueError("Email is already registered")

    try:
        user_role = Role(role)
    except ValueError as exc:
        raise ValueError(f"Unknown role '{role}'") from exc

    user = User(
        id=None,
        role=user_role,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=get_password_hash(password),
        avatar=avatar,
        is_active=True,
        created_at=now_in_app_timezone(),
    )

    return repository.create(user)
