"""Availability router - per-day property status derived from bookings and tasks."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db, utcnow
from staydesk.repositories import BookingRepository, HousekeepingRepository, PropertyRepository
from staydesk.schemas.dashboard import AvailabilitySummary
from staydesk.schemas.property import PropertyAvailability, PropertyCalendar
from staydesk.services.availability import AvailabilityService

router = APIRouter(tags=["availability"])


def get_availability_service(db: AsyncSession = Depends(get_db)) -> AvailabilityService:
    return AvailabilityService(
        properties=PropertyRepository(db),
        bookings=BookingRepository(db),
        tasks=HousekeepingRepository(db),
    )


@router.get("/availability", response_model=AvailabilitySummary)
async def get_availability_summary(
    day: Optional[date] = Query(None, alias="date"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Available / occupied / maintenance counts across active properties."""
    return await service.summary(day or utcnow().date())


@router.get("/properties/{property_id}/availability", response_model=PropertyAvailability)
async def get_property_availability(
    property_id: int,
    day: Optional[date] = Query(None, alias="date"),
    service: AvailabilityService = Depends(get_availability_service),
):
    return await service.property_status(property_id, day or utcnow().date())


@router.get("/properties/{property_id}/calendar", response_model=PropertyCalendar)
async def get_property_calendar(
    property_id: int,
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """One status per day over an inclusive range."""
    return await service.property_calendar(property_id, start_date, end_date)
