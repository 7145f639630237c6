"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import Conflict, InvalidCredentials, InvalidToken, MissingToken, ValidationError
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class TokenIdentity:
    """Caller identity carried by a verified session token."""

    user_id: int
    username: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, username: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed session token."""
    issued_at = datetime.now(UTC)
    expire = issued_at + (expires_delta or timedelta(minutes=settings.jwt_expiration_minutes))
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def verify_token(token: str | None) -> TokenIdentity:
    """Resolve a bearer token to its identity without touching the store."""
    if not token:
        raise MissingToken()

    payload = decode_access_token(token)
    if payload is None:
        raise InvalidToken()

    subject = payload.get("sub")
    username = payload.get("username")
    if subject is None or not isinstance(username, str):
        raise InvalidToken()
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise InvalidToken() from None

    return TokenIdentity(user_id=user_id, username=username)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def register_user(db: Session, username: str | None, password: str | None) -> User:
    """Create a new user. No token is issued; the caller logs in separately."""
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Username and password are required")

    if get_user_by_username(db, username):
        raise Conflict("User already exists")

    user = User(username=username, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("User already exists") from None
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, username: str | None, password: str | None) -> User:
    """Check credentials. Unknown user and wrong password raise the same error."""
    user = get_user_by_username(db, username.strip()) if username else None
    if user is None:
        # Keep timing comparable to a real hash check
        pwd_context.dummy_verify()
        logger.info("Failed login attempt for unknown username")
        raise InvalidCredentials()

    if not password or not verify_password(password, user.password_hash):
        logger.info(f"Failed login attempt for user {user.id}")
        raise InvalidCredentials()

    return user


def login(db: Session, username: str | None, password: str | None) -> tuple[str, User]:
    """Authenticate and issue a session token."""
    user = authenticate_user(db, username, password)
    return create_access_token(user.id, user.username), user
