"""Habit and HabitCompletion models."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import Frequency
from src.models.mixins import TimestampMixin


class Habit(Base, TimestampMixin):
    """A recurring task tracked by per-date completion marks."""

    __tablename__ = "habits"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False)
    frequency = Column(String(20), nullable=False, default=Frequency.DAILY.value)
    # Set only through create/update; toggling completions never touches it
    is_completed = Column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship("User", backref="habits")
    completions = relationship(
        "HabitCompletion",
        back_populates="habit",
        cascade="all, delete-orphan",
        order_by="HabitCompletion.completion_date",
    )


class HabitCompletion(Base):
    """Marks a habit as done on one calendar date."""

    __tablename__ = "habit_completions"

    habit_id = Column(
        Integer, ForeignKey("habits.id", ondelete="CASCADE"), primary_key=True
    )
    completion_date = Column(Date, primary_key=True)

    habit = relationship("Habit", back_populates="completions")
