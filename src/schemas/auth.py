"""Authentication schemas."""

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """User registration request."""

    username: str | None = Field(None, max_length=150)
    password: str | None = Field(None, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    username: str | None = Field(None, max_length=150)
    password: str | None = Field(None, max_length=128)


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class LoginResponse(BaseModel):
    """Login response with session token."""

    message: str = "Logged in"
    token: str
    username: str


class VerifyTokenResponse(BaseModel):
    """Result of a token check."""

    valid: bool = True
    username: str
