"""User and session repositories."""

from datetime import datetime
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import selectinload

from staydesk.models.user import User, UserSession
from staydesk.repositories.base import SqlRepository


class UserRepository(SqlRepository[User]):
    model = User
    default_order = User.id

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def find_conflict(self, username: str, email: str) -> Optional[User]:
        """First user already holding the username or email, if any."""
        result = await self.db.execute(
            select(User).where(or_(User.username == username, User.email == email)).limit(1)
        )
        return result.scalar_one_or_none()


class SessionRepository(SqlRepository[UserSession]):
    model = UserSession
    label = "Session"

    async def get_live(self, token_hash: str, now: datetime) -> Optional[UserSession]:
        """Unrevoked, unexpired session for the token hash, with its user loaded."""
        result = await self.db.execute(
            select(UserSession)
            .options(selectinload(UserSession.user))
            .where(
                UserSession.token_hash == token_hash,
                UserSession.revoked_at.is_(None),
                UserSession.expires_at > now,
            )
        )
        return result.scalar_one_or_none()
