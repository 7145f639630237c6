"""Event API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_event_service
from src.schemas.auth import MessageResponse
from src.schemas.event import EventResponse, EventSave, EventUpdateResponse
from src.services.auth import TokenIdentity
from src.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventResponse])
async def get_events(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[EventService, Depends(get_event_service)],
    month: Annotated[int | None, Query(ge=1, le=12)] = None,
    year: Annotated[int | None, Query(ge=1, le=9999)] = None,
):
    """Get events, limited to one calendar month when month and year are both given."""
    return service.list_events(current_user.user_id, month=month, year=year)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    event_data: EventSave,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Create a new event."""
    return service.create_event(
        current_user.user_id,
        title=event_data.title,
        event_date=event_data.event_date,
        description=event_data.description,
        event_time=event_data.event_time,
    )


@router.put("/{event_id}", response_model=EventUpdateResponse)
async def update_event(
    event_id: int,
    event_data: EventSave,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Overwrite an event."""
    event = service.update_event(
        current_user.user_id,
        event_id,
        title=event_data.title,
        event_date=event_data.event_date,
        description=event_data.description,
        event_time=event_data.event_time,
    )
    return EventUpdateResponse(
        message="Event updated",
        event=EventResponse.model_validate(event),
    )


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: int,
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Delete an event."""
    service.delete_event(current_user.user_id, event_id)
    return MessageResponse(message="Event deleted")
