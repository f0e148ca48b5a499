"""Precomputed analytics rollup rows."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base
from staydesk.models.enums import AnalyticsPeriod, db_enum

if TYPE_CHECKING:
    from staydesk.models.property import Property


class Analytics(Base):
    """Rollup row written out-of-band; never derived live."""

    __tablename__ = "analytics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    occupancy_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 2), nullable=True)
    revenue: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    bookings_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    average_stay: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 2), nullable=True)
    source: Mapped[Optional[AnalyticsPeriod]] = mapped_column(
        db_enum(AnalyticsPeriod), nullable=True
    )

    property: Mapped[Optional["Property"]] = relationship("Property", back_populates="analytics")
