"""SQLAlchemy models."""

from src.models.event import Event
from src.models.habit import Habit, HabitCompletion
from src.models.user import User

__all__ = [
    "User",
    "Habit",
    "HabitCompletion",
    "Event",
]
