"""Event service for calendar entries scoped by month."""

import logging
from datetime import date

from sqlalchemy.orm import Session

from src.exceptions import NotFound, ValidationError
from src.models.event import Event
from src.services.parsing import parse_date, parse_time

logger = logging.getLogger(__name__)


def month_bounds(month: int, year: int) -> tuple[date, date | None]:
    """First day of the month and first day of the following month.

    The upper bound is None for the last representable month.
    """
    start = date(year, month, 1)
    if month < 12:
        return start, date(year, month + 1, 1)
    if year == date.max.year:
        return start, None
    return start, date(year + 1, 1, 1)


class EventService:
    """Service for event-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_owned_event(self, user_id: int, event_id: int) -> Event:
        """Load an event, raising NotFound unless the user owns it."""
        event = self.db.query(Event).filter(Event.id == event_id).first()
        if event is None or event.user_id != user_id:
            raise NotFound("Event not found")
        return event

    def _apply(
        self,
        event: Event,
        title: str | None,
        event_date: str | None,
        description: str | None,
        event_time: str | None,
    ) -> None:
        if title is None or not title.strip() or not event_date:
            raise ValidationError("Title and date are required")
        parsed_date = parse_date(event_date, "event_date")
        parsed_time = parse_time(event_time, "event_time")

        event.event_date = parsed_date
        event.event_time = parsed_time
        event.title = title.strip()
        event.description = description or None

    def create_event(
        self,
        user_id: int,
        title: str | None,
        event_date: str | None,
        description: str | None = None,
        event_time: str | None = None,
    ) -> Event:
        """Create an event."""
        event = Event(user_id=user_id)
        self._apply(event, title, event_date, description, event_time)
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def list_events(
        self,
        user_id: int,
        month: int | None = None,
        year: int | None = None,
    ) -> list[Event]:
        """A user's events ordered by date then time, optionally within one month.

        The filter applies only when both month and year are given.
        """
        query = self.db.query(Event).filter(Event.user_id == user_id)

        if month is not None and year is not None:
            start, end = month_bounds(month, year)
            query = query.filter(Event.event_date >= start)
            if end is not None:
                query = query.filter(Event.event_date < end)
        elif month is not None or year is not None:
            logger.warning(
                f"Ignoring partial month filter (month={month}, year={year}) for user {user_id}"
            )

        return query.order_by(
            Event.event_date,
            Event.event_time.asc().nulls_first(),
            Event.id,
        ).all()

    def update_event(
        self,
        user_id: int,
        event_id: int,
        title: str | None,
        event_date: str | None,
        description: str | None = None,
        event_time: str | None = None,
    ) -> Event:
        """Overwrite every mutable field of an event."""
        event = self.get_owned_event(user_id, event_id)
        self._apply(event, title, event_date, description, event_time)
        self.db.commit()
        self.db.refresh(event)
        return event

    def delete_event(self, user_id: int, event_id: int) -> None:
        """Delete an event."""
        event = self.get_owned_event(user_id, event_id)
        self.db.delete(event)
        self.db.commit()
