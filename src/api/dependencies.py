"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import TokenIdentity, verify_token
from src.services.event_service import EventService
from src.services.habit_service import HabitService

# Missing credentials are reported by verify_token, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenIdentity:
    """Resolve the caller from the bearer token. No store lookup is made."""
    token = credentials.credentials if credentials else None
    return verify_token(token)


def get_habit_service(
    db: Annotated[Session, Depends(get_db)],
) -> HabitService:
    """Get habit service bound to the request session."""
    return HabitService(db)


def get_event_service(
    db: Annotated[Session, Depends(get_db)],
) -> EventService:
    """Get event service bound to the request session."""
    return EventService(db)
