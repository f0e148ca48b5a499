"""Analytics rollup repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select

from staydesk.models.analytics import Analytics
from staydesk.repositories.base import SqlRepository


class AnalyticsRepository(SqlRepository[Analytics]):
    model = Analytics
    default_order = Analytics.date.desc()

    async def query(
        self,
        property_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Analytics]:
        """Rows for an optional property within optional inclusive bounds, newest first."""
        query = select(Analytics)
        if property_id is not None:
            query = query.where(Analytics.property_id == property_id)
        if start is not None:
            query = query.where(Analytics.date >= start)
        if end is not None:
            query = query.where(Analytics.date <= end)
        result = await self.db.execute(query.order_by(Analytics.date.desc()))
        return list(result.scalars().all())
