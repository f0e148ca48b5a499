"""Dashboard router - stats cards and recent activity feed."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.config import get_settings
from staydesk.core.database import get_db
from staydesk.repositories import (
    BookingRepository,
    HousekeepingRepository,
    MessageRepository,
    PaymentRepository,
    PropertyRepository,
)
from staydesk.schemas.dashboard import DashboardStats, RecentActivity
from staydesk.services.dashboard import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    return DashboardService(
        properties=PropertyRepository(db),
        bookings=BookingRepository(db),
        messages=MessageRepository(db),
        tasks=HousekeepingRepository(db),
        payments=PaymentRepository(db),
        active_statuses=get_settings().active_booking_statuses,
    )


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(service: DashboardService = Depends(get_dashboard_service)):
    """Aggregate counts for the dashboard cards.

    - totalProperties: active properties
    - activeBookings: confirmed bookings not yet checked out
    - occupancyRate: activeBookings / totalProperties, in percent
    - monthlyRevenue: completed payments created this calendar month
    - unreadMessages / pendingTasks
    """
    return await service.get_stats()


@router.get("/recent-activity", response_model=RecentActivity)
async def get_recent_activity(
    limit: int = Query(20, ge=1, le=100),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Latest bookings, messages and housekeeping tasks, newest first."""
    return await service.recent_activity(limit)
