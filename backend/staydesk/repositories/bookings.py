"""Booking repository."""

from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import func, select

from staydesk.models.booking import Booking
from staydesk.models.enums import BookingStatus
from staydesk.repositories.base import SqlRepository


class BookingRepository(SqlRepository[Booking]):
    model = Booking
    default_order = (Booking.created_at.desc(), Booking.id.desc())

    async def recent(self, limit: int = 10) -> list[Booking]:
        return await self.list(limit=limit)

    async def count_active(self, now: datetime, statuses: Iterable[str]) -> int:
        """Bookings in one of ``statuses`` that have not checked out yet."""
        result = await self.db.execute(
            select(func.count(Booking.id)).where(
                Booking.status.in_(list(statuses)),
                Booking.check_out_date >= now,
            )
        )
        return result.scalar() or 0

    async def overlapping(
        self,
        start: datetime,
        end: datetime,
        property_ids: Optional[Iterable[int]] = None,
    ) -> list[Booking]:
        """Non-cancelled bookings whose stay touches ``[start, end]`` (inclusive)."""
        query = select(Booking).where(
            Booking.status != BookingStatus.CANCELLED,
            Booking.check_in_date <= end,
            Booking.check_out_date >= start,
        )
        if property_ids is not None:
            query = query.where(Booking.property_id.in_(list(property_ids)))
        result = await self.db.execute(query)
        return list(result.scalars().all())
