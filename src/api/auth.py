"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    VerifyTokenResponse,
)
from src.services import auth as auth_service
from src.services.auth import TokenIdentity

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user. Log in separately to obtain a token."""
    auth_service.register_user(db, user_data.username, user_data.password)
    return MessageResponse(message="User registered")


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with username and password."""
    token, user = auth_service.login(db, credentials.username, credentials.password)
    return LoginResponse(token=token, username=user.username)


@router.get("/verify-token", response_model=VerifyTokenResponse)
async def verify_token(
    current_user: Annotated[TokenIdentity, Depends(get_current_user)],
):
    """Check that the bearer token is valid."""
    return VerifyTokenResponse(valid=True, username=current_user.username)
