"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    VerifyTokenResponse,
)
from src.schemas.event import EventResponse, EventSave, EventUpdateResponse
from src.schemas.habit import HabitResponse, HabitSave, HabitToggle, HabitToggleResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "LoginResponse",
    "MessageResponse",
    "VerifyTokenResponse",
    "HabitSave",
    "HabitToggle",
    "HabitResponse",
    "HabitToggleResponse",
    "EventSave",
    "EventResponse",
    "EventUpdateResponse",
]
