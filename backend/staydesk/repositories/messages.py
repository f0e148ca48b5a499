"""Message repository."""

from sqlalchemy import func, select

from staydesk.models.message import Message
from staydesk.repositories.base import SqlRepository


class MessageRepository(SqlRepository[Message]):
    model = Message
    default_order = (Message.created_at.desc(), Message.id.desc())

    async def unread(self) -> list[Message]:
        return await self.list(is_read=False)

    async def count_unread(self) -> int:
        result = await self.db.execute(
            select(func.count(Message.id)).where(Message.is_read.is_(False))
        )
        return result.scalar() or 0

    async def mark_read(self, message_id: int) -> Message:
        """Idempotent: an already-read message is returned unchanged."""
        message = await self.get_or_404(message_id)
        if message.is_read:
            return message
        return await self.update(message_id, {"is_read": True})
