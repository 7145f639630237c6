"""Event schemas."""

from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class EventSave(BaseModel):
    """Create or fully overwrite an event."""

    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)
    event_date: str | None = None
    event_time: str | None = None


class EventResponse(BaseModel):
    """Event response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    event_date: date
    event_time: time | None

    @field_serializer("event_time")
    def serialize_event_time(self, value: time | None) -> str | None:
        return value.strftime("%H:%M") if value is not None else None


class EventUpdateResponse(BaseModel):
    """Acknowledgement of an update with the stored event."""

    message: str
    event: EventResponse
