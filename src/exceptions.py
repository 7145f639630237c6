"""Domain errors raised by services and mapped to HTTP responses in main."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry a user-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidCredentials(AppError):
    """Username unknown or password mismatch. Deliberately one error for both."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password"


class MissingToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Missing authentication token"


class InvalidToken(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class NotFound(AppError):
    """Record is absent or owned by someone else."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class StoreUnavailable(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage temporarily unavailable"
