"""Booking schemas."""

from typing import Optional

from pydantic import EmailStr, Field, ValidationInfo, field_validator, model_validator

from staydesk.schemas.base import BaseSchema, IDMixin, Money, TimestampMixin, UtcDateTime, reject_null
from staydesk.models.enums import BookingStatus, BookingSource, BookingPaymentStatus


class BookingCreate(BaseSchema):
    """Create a new booking."""

    property_id: int
    guest_name: str = Field(..., min_length=1, max_length=255)
    guest_email: EmailStr
    guest_phone: Optional[str] = Field(None, max_length=50)
    check_in_date: UtcDateTime
    check_out_date: UtcDateTime
    guests: int = Field(..., ge=1, le=50)
    total_amount: Money = Field(..., ge=0, max_digits=10, decimal_places=2)
    status: BookingStatus = BookingStatus.PENDING
    source: BookingSource = BookingSource.DIRECT
    external_booking_id: Optional[str] = Field(None, max_length=100)
    payment_status: BookingPaymentStatus = BookingPaymentStatus.PENDING
    special_requests: Optional[str] = None

    @model_validator(mode="after")
    def validate_dates(self):
        """Check-out must be after check-in."""
        if self.check_out_date <= self.check_in_date:
            raise ValueError("checkOutDate must be after checkInDate")
        return self


class BookingUpdate(BaseSchema):
    """Partial booking update (PUT and PATCH behave the same)."""

    property_id: Optional[int] = None
    guest_name: Optional[str] = Field(None, min_length=1, max_length=255)
    guest_email: Optional[EmailStr] = None
    guest_phone: Optional[str] = Field(None, max_length=50)
    check_in_date: Optional[UtcDateTime] = None
    check_out_date: Optional[UtcDateTime] = None
    guests: Optional[int] = Field(None, ge=1, le=50)
    total_amount: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)
    status: Optional[BookingStatus] = None
    source: Optional[BookingSource] = None
    external_booking_id: Optional[str] = Field(None, max_length=100)
    payment_status: Optional[BookingPaymentStatus] = None
    stripe_payment_intent_id: Optional[str] = Field(None, max_length=255)
    special_requests: Optional[str] = None

    @field_validator(
        "guest_name", "guest_email", "check_in_date", "check_out_date", "guests",
        "total_amount", "status", "source", "payment_status",
        mode="after",
    )
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class BookingResponse(BaseSchema, IDMixin, TimestampMixin):
    """Booking response."""

    property_id: Optional[int] = None
    guest_name: str
    guest_email: str
    guest_phone: Optional[str] = None
    check_in_date: UtcDateTime
    check_out_date: UtcDateTime
    guests: int
    total_amount: Money
    status: BookingStatus
    source: BookingSource
    external_booking_id: Optional[str] = None
    payment_status: BookingPaymentStatus
    stripe_payment_intent_id: Optional[str] = None
    special_requests: Optional[str] = None
