"""Property model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow

if TYPE_CHECKING:
    from staydesk.models.user import User
    from staydesk.models.booking import Booking
    from staydesk.models.message import Message
    from staydesk.models.housekeeping import HousekeepingTask
    from staydesk.models.ota_integration import OtaIntegration
    from staydesk.models.analytics import Analytics


class Property(Base):
    """A rental unit listed by an operator.

    ``is_active`` gates visibility in listings and in the dashboard counts.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)  # apartment, house, studio, ...

    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    bathrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    max_guests: Mapped[int] = mapped_column(Integer, nullable=False)

    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cleaning_fee: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"))

    # Weak reference, no cascade
    owner_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )

    images: Mapped[list[str]] = mapped_column(JSON, default=list)
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # External listing ids
    airbnb_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    booking_com_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    vrbo_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    # Relationships
    owner: Mapped[Optional["User"]] = relationship("User", back_populates="properties")
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="property")
    messages: Mapped[list["Message"]] = relationship("Message", back_populates="property")
    housekeeping_tasks: Mapped[list["HousekeepingTask"]] = relationship(
        "HousekeepingTask", back_populates="property"
    )
    ota_integrations: Mapped[list["OtaIntegration"]] = relationship(
        "OtaIntegration", back_populates="property"
    )
    analytics: Mapped[list["Analytics"]] = relationship("Analytics", back_populates="property")

    __table_args__ = (
        CheckConstraint("base_price >= 0", name="ck_property_base_price_non_negative"),
    )
