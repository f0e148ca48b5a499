"""Booking model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow
from staydesk.models.enums import (
    BookingStatus,
    BookingSource,
    BookingPaymentStatus,
    db_enum,
)

if TYPE_CHECKING:
    from staydesk.models.property import Property
    from staydesk.models.message import Message
    from staydesk.models.housekeeping import HousekeepingTask
    from staydesk.models.payment import Payment


class Booking(Base):
    """A reservation for a property, direct or from an OTA channel.

    Status transitions drive availability (anything but ``cancelled`` blocks
    the dates) and the housekeeping schedule.
    """

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True, index=True
    )

    # Guest contact
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_email: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Stay
    check_in_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    check_out_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    guests: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    status: Mapped[BookingStatus] = mapped_column(
        db_enum(BookingStatus),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )
    source: Mapped[BookingSource] = mapped_column(
        db_enum(BookingSource), default=BookingSource.DIRECT, nullable=False
    )
    external_booking_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    payment_status: Mapped[BookingPaymentStatus] = mapped_column(
        db_enum(BookingPaymentStatus), default=BookingPaymentStatus.PENDING, nullable=False
    )
    stripe_payment_intent_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    special_requests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    # Relationships
    property: Mapped[Optional["Property"]] = relationship("Property", back_populates="bookings")
    messages: Mapped[list["Message"]] = relationship("Message", back_populates="booking")
    housekeeping_tasks: Mapped[list["HousekeepingTask"]] = relationship(
        "HousekeepingTask", back_populates="booking"
    )
    payments: Mapped[list["Payment"]] = relationship("Payment", back_populates="booking")
