"""Property repository."""

from typing import Optional

from sqlalchemy import func, select

from staydesk.models.property import Property
from staydesk.repositories.base import SqlRepository


class PropertyRepository(SqlRepository[Property]):
    model = Property
    default_order = Property.name

    async def list_visible(
        self,
        include_inactive: bool = False,
        owner_id: Optional[int] = None,
    ) -> list[Property]:
        """Listing as shown in the dashboard: active properties unless asked otherwise."""
        return await self.list(
            is_active=None if include_inactive else True,
            owner_id=owner_id,
        )

    async def count_active(self) -> int:
        result = await self.db.execute(
            select(func.count(Property.id)).where(Property.is_active.is_(True))
        )
        return result.scalar() or 0
