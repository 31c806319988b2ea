"""Domain entity representing a user role."""

from enum import Enum


class Role(str, Enum):
    """Closed set of roles that can be assigned to a user."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


__all__ = ["Role"]
