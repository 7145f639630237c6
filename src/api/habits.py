"""Habit API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_habit_service
from src.models.habit import Habit
from src.schemas.auth import MessageResponse
from src.schemas.habit import HabitResponse, HabitSave, HabitToggle, HabitToggleResponse
from src.services.auth import TokenIdentity
from src.services.habit_service import HabitService

router = APIRouter(prefix="/habits", tags=["habits"])


def build_habit_response(habit: Habit, completed_dates) -> HabitResponse:
    habit_response = HabitResponse.model_validate(habit)
    habit_response.completed_dates = list(completed_dates)
    return habit_response


@router.get("", response_model=list[HabitResponse])
async def get_habits(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[HabitService, Depends(get_habit_service)],
):
    """Get all habits of the current user with their completion dates."""
    return [
        build_habit_response(habit, dates)
        for habit, dates in service.list_habits(current_user.user_id)
    ]


@router.post("", response_model=HabitResponse, status_code=status.HTTP_201_CREATED)
async def create_habit(
    habit_data: HabitSave,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[HabitService, Depends(get_habit_service)],
):
    """Create a new habit."""
    habit = service.create_habit(
        current_user.user_id,
        title=habit_data.title,
        start_date=habit_data.start_date,
        description=habit_data.description,
        frequency=habit_data.frequency,
        is_completed=habit_data.is_completed,
    )
    return build_habit_response(habit, [])


@router.put("/{habit_id}", response_model=HabitResponse)
async def update_habit(
    habit_id: int,
    habit_data: HabitSave,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[HabitService, Depends(get_habit_service)],
):
    """Overwrite a habit."""
    habit = service.update_habit(
        current_user.user_id,
        habit_id,
        title=habit_data.title,
        start_date=habit_data.start_date,
        description=habit_data.description,
        frequency=habit_data.frequency,
        is_completed=habit_data.is_completed,
    )
    return build_habit_response(habit, service.completion_dates(habit.id))


@router.delete("/{habit_id}", response_model=MessageResponse)
async def delete_habit(
    habit_id: int,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[HabitService, Depends(get_habit_service)],
):
    """Delete a habit and its completion history."""
    service.delete_habit(current_user.user_id, habit_id)
    return MessageResponse(message="Habit deleted")


@router.post("/{habit_id}/toggle", response_model=HabitToggleResponse)
async def toggle_habit(
    habit_id: int,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[HabitService, Depends(get_habit_service)],
    toggle: HabitToggle | None = None,
):
    """Mark or unmark a habit on a date (today when no date is given)."""
    result = service.toggle_completion(
        current_user.user_id,
        habit_id,
        toggle.date if toggle else None,
    )
    return HabitToggleResponse(
        completed_dates=result.completion_dates,
        is_completed=result.is_completed,
    )
