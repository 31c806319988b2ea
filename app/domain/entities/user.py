"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    first_name: str
    last_name: str
    email: str
    password: str
    avatar: str | None
    is_active: bool
    created_at: datetime | None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def has_role(self, role: Role | str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.value == Role(role).value

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(Role.ADMIN)


__all__ = ["User"]
