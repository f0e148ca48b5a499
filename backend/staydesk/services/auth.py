"""User registration and bearer-token sessions."""

import logging
from typing import Any

from staydesk.core.database import utcnow
from staydesk.core.errors import AuthenticationError, ConflictError
from staydesk.core.security import hash_password, new_session_token, verify_password
from staydesk.models.user import User
from staydesk.repositories import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserRepository, sessions: SessionRepository):
        self.users = users
        self.sessions = sessions

    async def register(self, values: dict[str, Any]) -> User:
        """Create a user, storing a bcrypt hash in place of the password."""
        if await self.users.find_conflict(values["username"], values["email"]):
            raise ConflictError("Username or email already registered")

        values = dict(values)
        values["password_hash"] = hash_password(values.pop("password"))
        user = await self.users.create(values)
        logger.info(f"[AUTH] Registered user {user.id} ({user.username})")
        return user

    async def login(self, username: str, password: str) -> tuple[str, Any, User]:
        """Return ``(token, expires_at, user)`` for valid credentials."""
        user = await self.users.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"[AUTH] Failed login for {username}")
            raise AuthenticationError("Invalid username or password")

        token, token_hash, expires_at = new_session_token()
        await self.sessions.create({
            "user_id": user.id,
            "token_hash": token_hash,
            "expires_at": expires_at,
        })
        logger.info(f"[AUTH] User {user.id} logged in")
        return token, expires_at, user

    async def logout(self, session_id: int) -> None:
        await self.sessions.update(session_id, {"revoked_at": utcnow()})
