"""
Dashboard aggregation.

Every call re-queries the store; nothing is cached. A failure in any one
count fails the whole snapshot.
"""

import logging
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError

from staydesk.core.database import utcnow
from staydesk.core.errors import StoreError
from staydesk.models.enums import BookingStatus
from staydesk.repositories import (
    BookingRepository,
    HousekeepingRepository,
    MessageRepository,
    PaymentRepository,
    PropertyRepository,
)
from staydesk.schemas.dashboard import ActivityItem, DashboardStats, RecentActivity
from staydesk.services.availability import occupancy_rate

logger = logging.getLogger(__name__)


def month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """First instant of ``now``'s month and of the following month."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


class DashboardService:
    def __init__(
        self,
        properties: PropertyRepository,
        bookings: BookingRepository,
        messages: MessageRepository,
        tasks: HousekeepingRepository,
        payments: PaymentRepository,
        active_statuses: Iterable[str] = ("confirmed",),
    ):
        self.properties = properties
        self.bookings = bookings
        self.messages = messages
        self.tasks = tasks
        self.payments = payments
        self.active_statuses = [BookingStatus(s) for s in active_statuses]

    async def get_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        """Snapshot of the dashboard cards as of ``now`` (naive UTC)."""
        now = now or utcnow()
        month_start, next_month = month_bounds(now)

        try:
            total_properties = await self.properties.count_active()
            active_bookings = await self.bookings.count_active(now, self.active_statuses)
            unread_messages = await self.messages.count_unread()
            pending_tasks = await self.tasks.count_pending()
            monthly_revenue = await self.payments.sum_completed_between(month_start, next_month)
        except SQLAlchemyError as e:
            logger.error(f"[DASHBOARD] Error fetching dashboard stats: {e}")
            raise StoreError("Error fetching dashboard stats") from e

        logger.info(
            f"[DASHBOARD] properties={total_properties} active={active_bookings} "
            f"unread={unread_messages} pending={pending_tasks}"
        )
        return DashboardStats(
            total_properties=total_properties,
            active_bookings=active_bookings,
            occupancy_rate=occupancy_rate(active_bookings, total_properties),
            monthly_revenue=monthly_revenue,
            unread_messages=unread_messages,
            pending_tasks=pending_tasks,
        )

    async def recent_activity(self, limit: int = 20) -> RecentActivity:
        """Latest bookings, messages and tasks merged into one feed."""
        try:
            bookings = await self.bookings.recent(limit)
            messages = await self.messages.list(limit=limit)
            tasks = await self.tasks.list(limit=limit)
        except SQLAlchemyError as e:
            logger.error(f"[DASHBOARD] Error fetching recent activity: {e}")
            raise StoreError("Error fetching recent activity") from e

        activities = []
        for booking in bookings:
            activities.append(ActivityItem(
                type="booking",
                action=f"booking_{booking.status.value}",
                timestamp=booking.created_at,
                details={
                    "bookingId": booking.id,
                    "propertyId": booking.property_id,
                    "guestName": booking.guest_name,
                    "source": booking.source.value,
                },
            ))
        for message in messages:
            activities.append(ActivityItem(
                type="message",
                action="message_read" if message.is_read else "message_received",
                timestamp=message.created_at,
                details={
                    "messageId": message.id,
                    "bookingId": message.booking_id,
                    "sender": message.sender.value,
                    "senderName": message.sender_name,
                },
            ))
        for task in tasks:
            activities.append(ActivityItem(
                type="housekeeping",
                action=f"task_{task.status.value}",
                timestamp=task.created_at,
                details={
                    "taskId": task.id,
                    "propertyId": task.property_id,
                    "taskType": task.task_type.value,
                },
            ))

        activities.sort(key=lambda item: item.timestamp or datetime.min, reverse=True)
        activities = activities[:limit]
        return RecentActivity(activities=activities, total=len(activities))
