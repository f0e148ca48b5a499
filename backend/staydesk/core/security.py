"""Password hashing and bearer-token session dependencies.

The authenticated user travels with the request (FastAPI dependency), never
through module-level state.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.config import get_settings
from staydesk.core.database import get_db, utcnow
from staydesk.core.errors import AuthenticationError

settings = get_settings()

_pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_bcrypt_rounds,
)

security = HTTPBearer(auto_error=False)


def _prepare_password(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    if len(password.encode("utf-8")) > 71:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()
    return password


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return _pwd_context.hash(_prepare_password(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    try:
        return _pwd_context.verify(_prepare_password(plain_password), hashed_password)
    except ValueError:
        # Malformed hash in storage
        return False


def hash_token(token: str) -> str:
    """Hash a session token for storage."""
    return hashlib.sha256(token.encode()).hexdigest()


def new_session_token() -> tuple[str, str, datetime]:
    """Generate ``(token, token_hash, expires_at)`` for a fresh session."""
    token = secrets.token_urlsafe(48)
    expires_at = utcnow() + timedelta(hours=settings.session_ttl_hours)
    return token, hash_token(token), expires_at


class AuthenticatedUser:
    """Represents the user resolved from the request's bearer token."""

    def __init__(self, user_id: int, username: str, role: str, session_id: int):
        self.user_id = user_id
        self.username = username
        self.role = role
        self.session_id = session_id


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> AuthenticatedUser:
    """Resolve the bearer token to a live session and its user."""
    from staydesk.repositories.users import SessionRepository

    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    session = await SessionRepository(db).get_live(hash_token(credentials.credentials), utcnow())
    if session is None:
        raise AuthenticationError("Invalid or expired session token")

    user = session.user
    return AuthenticatedUser(
        user_id=user.id,
        username=user.username,
        role=user.role.value,
        session_id=session.id,
    )
