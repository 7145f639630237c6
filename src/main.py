"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from src.api import auth, events, habits
from src.config import get_settings
from src.exceptions import AppError, StoreUnavailable

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting habit calendar API ({settings.environment})")
    yield
    logger.info("Shutting down habit calendar API")


app = FastAPI(
    title="Habit Calendar API",
    description="Personal habit and calendar event tracking",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render domain errors as ``{"detail": message}``."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, ids and query values are plain 400s."""
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request"},
    )


@app.exception_handler(OperationalError)
@app.exception_handler(PoolTimeoutError)
async def store_error_handler(request: Request, exc: Exception):
    """Store failures and pool timeouts surface as StoreUnavailable."""
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    error = StoreUnavailable()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


# Register routers
app.include_router(auth.router)
app.include_router(habits.router)
app.include_router(events.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
