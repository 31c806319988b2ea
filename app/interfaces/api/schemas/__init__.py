from .auth import Token, UserRead, UserResponse
from .envelope import (
    EmptyDataResponse,
    ErrorResponse,
    MessageResponse,
    NotificationListResponse,
    NotificationResponse,
)
from .notification import (
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
    SenderRead,
)

__all__ = [
    "EmptyDataResponse",
    "ErrorResponse",
    "MessageResponse",
    "NotificationCreate",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "NotificationUpdate",
    "SenderRead",
    "Token",
    "UserRead",
    "UserResponse",
]
