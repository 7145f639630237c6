"""Enums for model fields."""

from enum import Enum


class Frequency(str, Enum):
    """Advisory schedule tag for a habit. Not enforced by any scheduling logic."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: str | None) -> "Frequency | None":
        """Return the matching member, or None when the value is not recognised."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
