"""Housekeeping task repository."""

from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import func, select

from staydesk.models.enums import TaskStatus
from staydesk.models.housekeeping import HousekeepingTask
from staydesk.repositories.base import SqlRepository


class HousekeepingRepository(SqlRepository[HousekeepingTask]):
    model = HousekeepingTask
    default_order = (HousekeepingTask.created_at.desc(), HousekeepingTask.id.desc())
    label = "Housekeeping task"

    async def pending(self) -> list[HousekeepingTask]:
        return await self.list(status=TaskStatus.PENDING)

    async def count_pending(self) -> int:
        result = await self.db.execute(
            select(func.count(HousekeepingTask.id)).where(
                HousekeepingTask.status == TaskStatus.PENDING
            )
        )
        return result.scalar() or 0

    async def open_due_between(
        self,
        start: datetime,
        end: datetime,
        property_ids: Optional[Iterable[int]] = None,
    ) -> list[HousekeepingTask]:
        """Tasks not yet completed with a due date inside ``[start, end]``."""
        query = select(HousekeepingTask).where(
            HousekeepingTask.status != TaskStatus.COMPLETED,
            HousekeepingTask.due_date.is_not(None),
            HousekeepingTask.due_date >= start,
            HousekeepingTask.due_date <= end,
        )
        if property_ids is not None:
            query = query.where(HousekeepingTask.property_id.in_(list(property_ids)))
        result = await self.db.execute(query)
        return list(result.scalars().all())
