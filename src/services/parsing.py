"""Parsing of wire-format dates and times."""

from datetime import date, datetime, time

from src.exceptions import ValidationError

TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_date(value: str | None, field: str) -> date:
    """Parse a required ``YYYY-MM-DD`` value."""
    if not value:
        raise ValidationError(f"{field} is required")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date") from None


def parse_time(value: str | None, field: str) -> time | None:
    """Parse an optional ``HH:MM`` (or ``HH:MM:SS``) value. Seconds are dropped."""
    if not value:
        return None
    for time_format in TIME_FORMATS:
        try:
            parsed = datetime.strptime(value.strip(), time_format).time()
        except ValueError:
            continue
        return parsed.replace(second=0)
    raise ValidationError(f"{field} must be an HH:MM time")
