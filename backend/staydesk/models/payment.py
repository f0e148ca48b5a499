"""Payment model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow
from staydesk.models.enums import PaymentMethod, PaymentStatus, db_enum

if TYPE_CHECKING:
    from staydesk.models.booking import Booking


class Payment(Base):
    """A charge against a booking. A booking may carry several (retries, refunds)."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    booking_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("bookings.id"), nullable=True, index=True
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)
    status: Mapped[PaymentStatus] = mapped_column(
        db_enum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False, index=True
    )
    payment_method: Mapped[Optional[PaymentMethod]] = mapped_column(
        db_enum(PaymentMethod), nullable=True
    )
    stripe_payment_intent_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    processing_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    booking: Mapped[Optional["Booking"]] = relationship("Booking", back_populates="payments")
