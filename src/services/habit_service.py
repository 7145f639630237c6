"""Habit service: habit records and their per-date completion marks."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import NotFound, ValidationError
from src.models.enums import Frequency
from src.models.habit import Habit, HabitCompletion
from src.services.parsing import parse_date

logger = logging.getLogger(__name__)


@dataclass
class ToggleResult:
    """Completion set after a toggle, and whether this call marked the date."""

    completion_dates: list[date]
    is_completed: bool


def _normalize_frequency(value: str | None) -> str:
    frequency = Frequency.parse(value)
    if frequency is None:
        if value:
            logger.info(f"Unrecognised frequency {value!r}, storing as daily")
        return Frequency.DAILY.value
    return frequency.value


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title and start date are required")
    return title.strip()


class HabitService:
    """Service for habit-related operations.

    Every method takes the acting user's id. Records owned by someone else are
    reported exactly like records that do not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_owned_habit(self, user_id: int, habit_id: int) -> Habit:
        """Load a habit, raising NotFound unless the user owns it."""
        habit = self.db.query(Habit).filter(Habit.id == habit_id).first()
        if habit is None or habit.user_id != user_id:
            if habit is not None:
                logger.info(f"User {user_id} addressed habit {habit_id} owned by another user")
            raise NotFound("Habit not found")
        return habit

    def completion_dates(self, habit_id: int) -> list[date]:
        """All completion dates for a habit, ascending."""
        rows = (
            self.db.query(HabitCompletion.completion_date)
            .filter(HabitCompletion.habit_id == habit_id)
            .order_by(HabitCompletion.completion_date)
            .all()
        )
        return [completion_date for (completion_date,) in rows]

    def create_habit(
        self,
        user_id: int,
        title: str | None,
        start_date: str | None,
        description: str | None = None,
        frequency: str | None = None,
        is_completed: bool | None = None,
    ) -> Habit:
        """Create a habit. The stored completion flag defaults to False."""
        habit = Habit(
            user_id=user_id,
            title=_require_title(title),
            description=description or None,
            start_date=parse_date(start_date, "start_date"),
            frequency=_normalize_frequency(frequency),
            is_completed=bool(is_completed) if is_completed is not None else False,
        )
        self.db.add(habit)
        self.db.commit()
        self.db.refresh(habit)
        return habit

    def update_habit(
        self,
        user_id: int,
        habit_id: int,
        title: str | None,
        start_date: str | None,
        description: str | None = None,
        frequency: str | None = None,
        is_completed: bool | None = None,
    ) -> Habit:
        """Overwrite all fields; the stored completion flag is kept when omitted."""
        habit = self.get_owned_habit(user_id, habit_id)
        new_title = _require_title(title)
        new_start_date = parse_date(start_date, "start_date")

        habit.title = new_title
        habit.description = description or None
        habit.start_date = new_start_date
        habit.frequency = _normalize_frequency(frequency)
        if is_completed is not None:
            habit.is_completed = is_completed

        self.db.commit()
        self.db.refresh(habit)
        return habit

    def delete_habit(self, user_id: int, habit_id: int) -> None:
        """Delete a habit together with all of its completion records."""
        habit = self.get_owned_habit(user_id, habit_id)
        # ORM cascade removes completions in the same transaction
        self.db.delete(habit)
        self.db.commit()
        logger.info(f"Deleted habit {habit_id} for user {user_id}")

    def list_habits(self, user_id: int) -> list[tuple[Habit, list[date]]]:
        """All of a user's habits, newest first, each with its completion dates."""
        habits = (
            self.db.query(Habit)
            .filter(Habit.user_id == user_id)
            .order_by(Habit.created_at.desc(), Habit.id.desc())
            .all()
        )

        dates_by_habit: dict[int, list[date]] = defaultdict(list)
        habit_ids = [habit.id for habit in habits]
        if habit_ids:
            rows = (
                self.db.query(HabitCompletion.habit_id, HabitCompletion.completion_date)
                .filter(HabitCompletion.habit_id.in_(habit_ids))
                .order_by(HabitCompletion.habit_id, HabitCompletion.completion_date)
                .all()
            )
            for habit_id, completion_date in rows:
                dates_by_habit[habit_id].append(completion_date)

        return [(habit, dates_by_habit.get(habit.id, [])) for habit in habits]

    def toggle_completion(
        self,
        user_id: int,
        habit_id: int,
        on_date: str | None = None,
    ) -> ToggleResult:
        """Flip the completion mark for a date (today in UTC when omitted).

        The delete is a single conditional statement, so its row count says
        whether a mark existed. Only when nothing was removed is an insert
        attempted; losing that insert to a concurrent toggle is not an error.
        """
        self.get_owned_habit(user_id, habit_id)
        completion_date = (
            parse_date(on_date, "date") if on_date else datetime.now(UTC).date()
        )

        deleted = (
            self.db.query(HabitCompletion)
            .filter(
                HabitCompletion.habit_id == habit_id,
                HabitCompletion.completion_date == completion_date,
            )
            .delete(synchronize_session=False)
        )

        if deleted:
            self.db.commit()
            inserted = False
        else:
            self.db.add(HabitCompletion(habit_id=habit_id, completion_date=completion_date))
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.warning(
                    f"Completion for habit {habit_id} on {completion_date} "
                    "was inserted concurrently"
                )
            inserted = True

        logger.debug(
            f"Habit {habit_id} {'marked' if inserted else 'unmarked'} on {completion_date}"
        )
        return ToggleResult(
            completion_dates=self.completion_dates(habit_id),
            is_completed=inserted,
        )
