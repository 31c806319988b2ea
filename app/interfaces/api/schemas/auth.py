"""Authentication related schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.entities import Role


class Token(BaseModel):
    access_token: str
    token_type: str
    role: Role


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    role: Role
    avatar: str | None = None
    is_active: bool
    created_at: datetime | None = None


class UserResponse(BaseModel):
    success: bool = True
    data: UserRead
