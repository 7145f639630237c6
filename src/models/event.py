"""Calendar event model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Event(Base, TimestampMixin):
    """A dated calendar entry with an optional time of day."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    event_time = Column(Time, nullable=True)  # null means all-day

    # Relationships
    user = relationship("User", backref="events")
