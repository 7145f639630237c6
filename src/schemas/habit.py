"""Habit schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class HabitSave(BaseModel):
    """Create or fully overwrite a habit.

    Fields are loosely typed so that missing or malformed values reach the
    service, which reports them as validation errors.
    """

    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)
    start_date: str | None = None
    # Unrecognised tags are normalised by the service, not rejected
    frequency: str | None = None
    is_completed: bool | None = None


class HabitToggle(BaseModel):
    """Toggle request; date defaults to today."""

    date: str | None = None


class HabitResponse(BaseModel):
    """Habit with its completion dates."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    start_date: date
    frequency: str
    is_completed: bool
    created_at: datetime
    completed_dates: list[date] = []


class HabitToggleResponse(BaseModel):
    """Outcome of a toggle.

    ``is_completed`` is True when this call marked the date and False when it
    removed the mark. It is unrelated to the habit's stored ``is_completed``.
    """

    success: bool = True
    completed_dates: list[date]
    is_completed: bool
