"""Bookings router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.config import get_settings
from staydesk.core.database import get_db
from staydesk.models.enums import BookingStatus
from staydesk.repositories import (
    BookingRepository,
    MessageRepository,
    PaymentRepository,
    PropertyRepository,
)
from staydesk.schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from staydesk.schemas.message import MessageResponse
from staydesk.schemas.payment import PaymentResponse
from staydesk.services.bookings import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        bookings=BookingRepository(db),
        properties=PropertyRepository(db),
        reject_double_bookings=get_settings().reject_double_bookings,
    )


@router.get("", response_model=List[BookingResponse])
async def list_bookings(
    property_id: Optional[int] = Query(None, alias="propertyId"),
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """List bookings, newest first."""
    bookings = await BookingRepository(db).list(property_id=property_id, status=status_filter)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/recent", response_model=List[BookingResponse])
async def list_recent_bookings(
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    bookings = await BookingRepository(db).recent(limit)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(booking_id: int, db: AsyncSession = Depends(get_db)):
    booking = await BookingRepository(db).get_or_404(booking_id)
    return BookingResponse.model_validate(booking)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.create(data.model_dump())
    return BookingResponse.model_validate(booking)


@router.put("/{booking_id}", response_model=BookingResponse)
@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.update(booking_id, data.model_dump(exclude_unset=True))
    return BookingResponse.model_validate(booking)


@router.get("/{booking_id}/payments", response_model=List[PaymentResponse])
async def list_booking_payments(booking_id: int, db: AsyncSession = Depends(get_db)):
    await BookingRepository(db).get_or_404(booking_id)
    payments = await PaymentRepository(db).list(booking_id=booking_id)
    return [PaymentResponse.model_validate(p) for p in payments]


@router.get("/{booking_id}/messages", response_model=List[MessageResponse])
async def list_booking_messages(booking_id: int, db: AsyncSession = Depends(get_db)):
    await BookingRepository(db).get_or_404(booking_id)
    messages = await MessageRepository(db).list(booking_id=booking_id)
    return [MessageResponse.model_validate(m) for m in messages]
