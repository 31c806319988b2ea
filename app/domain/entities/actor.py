"""Domain entity describing who performs an operation."""

from dataclasses import dataclass

from .role import Role
from .user import User


@dataclass(frozen=True)
class Actor:
    """Authenticated identity and role attached to a single request."""

    id: int
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        if user.id is None:
            raise ValueError("An actor requires a persisted user")
        return cls(id=user.id, role=user.role)


__all__ = ["Actor"]
