"""Uniform response wrappers shared by every endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .notification import NotificationRead


class NotificationResponse(BaseModel):
    success: bool = True
    data: NotificationRead


class NotificationListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[NotificationRead]


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class EmptyDataResponse(BaseModel):
    success: bool = True
    data: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


__all__ = [
    "EmptyDataResponse",
    "ErrorResponse",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationResponse",
]
