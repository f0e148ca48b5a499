"""
Availability deriver.

A property's status on a given day is computed from its bookings and
housekeeping tasks; it is never stored. Priority, first match wins:

1. occupied     - a non-cancelled booking whose stay touches the day
                  (check-in or check-out on the day both count)
2. maintenance  - a task not yet completed that is due within the day
3. available    - otherwise

The pure functions below work on already-fetched collections so they can be
exercised without a database; ``AvailabilityService`` does the fetching.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from staydesk.core.errors import StoreError, ValidationError
from staydesk.models.booking import Booking
from staydesk.models.enums import AvailabilityStatus, BookingStatus, TaskStatus
from staydesk.models.housekeeping import HousekeepingTask
from staydesk.models.property import Property
from staydesk.repositories import BookingRepository, HousekeepingRepository, PropertyRepository
from staydesk.schemas.dashboard import AvailabilitySummary, PropertyStatusEntry
from staydesk.schemas.property import PropertyAvailability, PropertyCalendar

logger = logging.getLogger(__name__)

MAX_CALENDAR_DAYS = 62


def day_window(day: date) -> tuple[datetime, datetime]:
    """``[00:00:00, 23:59:59.999999]`` of ``day``, both ends inclusive."""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def _blocks_day(booking: Booking, start: datetime, end: datetime) -> bool:
    return (
        booking.status != BookingStatus.CANCELLED
        and booking.check_in_date <= end
        and booking.check_out_date >= start
    )


def _due_on_day(task: HousekeepingTask, start: datetime, end: datetime) -> bool:
    return (
        task.status != TaskStatus.COMPLETED
        and task.due_date is not None
        and start <= task.due_date <= end
    )


def derive_status(
    property_id: int,
    day: date,
    bookings: Iterable[Booking],
    tasks: Iterable[HousekeepingTask],
) -> AvailabilityStatus:
    """Status of one property on one day."""
    start, end = day_window(day)

    for booking in bookings:
        if booking.property_id == property_id and _blocks_day(booking, start, end):
            return AvailabilityStatus.OCCUPIED

    for task in tasks:
        if task.property_id == property_id and _due_on_day(task, start, end):
            return AvailabilityStatus.MAINTENANCE

    return AvailabilityStatus.AVAILABLE


def occupancy_rate(count: int, total: int) -> float:
    """Percentage rounded to one decimal; 0 when either side is 0."""
    if count == 0 or total == 0:
        return 0
    return round(count / total * 100, 1)


def summarize_availability(
    properties: Sequence[Property],
    day: date,
    bookings: Sequence[Booking],
    tasks: Sequence[HousekeepingTask],
) -> AvailabilitySummary:
    """Counts per status across ``properties`` for the availability cards."""
    entries = [
        PropertyStatusEntry(
            property_id=prop.id,
            name=prop.name,
            status=derive_status(prop.id, day, bookings, tasks),
        )
        for prop in properties
    ]
    counts = {status: 0 for status in AvailabilityStatus}
    for entry in entries:
        counts[entry.status] += 1

    total = len(entries)
    occupied = counts[AvailabilityStatus.OCCUPIED]
    return AvailabilitySummary(
        date=day,
        total=total,
        available=counts[AvailabilityStatus.AVAILABLE],
        occupied=occupied,
        maintenance=counts[AvailabilityStatus.MAINTENANCE],
        occupancy_rate=occupancy_rate(occupied, total),
        properties=entries,
    )


def calendar_days(start_date: date, end_date: date) -> list[date]:
    """Inclusive list of days, bounded to ``MAX_CALENDAR_DAYS``."""
    if end_date < start_date:
        raise ValidationError("endDate must not be before startDate", field="endDate")
    span = (end_date - start_date).days + 1
    if span > MAX_CALENDAR_DAYS:
        raise ValidationError(
            f"Calendar range is limited to {MAX_CALENDAR_DAYS} days", field="endDate"
        )
    return [start_date + timedelta(days=offset) for offset in range(span)]


def build_calendar(
    property_id: int,
    days: Sequence[date],
    bookings: Sequence[Booking],
    tasks: Sequence[HousekeepingTask],
) -> PropertyCalendar:
    return PropertyCalendar(
        property_id=property_id,
        start_date=days[0],
        end_date=days[-1],
        days=[
            PropertyAvailability(
                property_id=property_id,
                date=day,
                status=derive_status(property_id, day, bookings, tasks),
            )
            for day in days
        ],
    )


class AvailabilityService:
    """Fetches the relevant bookings and tasks, then runs the deriver."""

    def __init__(
        self,
        properties: PropertyRepository,
        bookings: BookingRepository,
        tasks: HousekeepingRepository,
    ):
        self.properties = properties
        self.bookings = bookings
        self.tasks = tasks

    async def _window(
        self, start: datetime, end: datetime, property_ids: Optional[list[int]]
    ) -> tuple[list[Booking], list[HousekeepingTask]]:
        try:
            bookings = await self.bookings.overlapping(start, end, property_ids)
            tasks = await self.tasks.open_due_between(start, end, property_ids)
        except SQLAlchemyError as e:
            logger.error(f"[AVAILABILITY] Query failed: {e}")
            raise StoreError("Error fetching availability") from e
        return bookings, tasks

    async def property_status(self, property_id: int, day: date) -> PropertyAvailability:
        await self.properties.get_or_404(property_id)
        start, end = day_window(day)
        bookings, tasks = await self._window(start, end, [property_id])
        return PropertyAvailability(
            property_id=property_id,
            date=day,
            status=derive_status(property_id, day, bookings, tasks),
        )

    async def property_calendar(
        self, property_id: int, start_date: date, end_date: date
    ) -> PropertyCalendar:
        days = calendar_days(start_date, end_date)
        await self.properties.get_or_404(property_id)
        start, _ = day_window(days[0])
        _, end = day_window(days[-1])
        bookings, tasks = await self._window(start, end, [property_id])
        return build_calendar(property_id, days, bookings, tasks)

    async def summary(self, day: date) -> AvailabilitySummary:
        properties = await self.properties.list_visible()
        if not properties:
            return summarize_availability([], day, [], [])
        start, end = day_window(day)
        bookings, tasks = await self._window(start, end, [prop.id for prop in properties])
        logger.info(
            f"[AVAILABILITY] {day.isoformat()}: {len(properties)} properties, "
            f"{len(bookings)} bookings, {len(tasks)} open tasks"
        )
        return summarize_availability(properties, day, bookings, tasks)
