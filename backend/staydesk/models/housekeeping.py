"""Housekeeping task model (cleaning / maintenance / inspection)."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow
from staydesk.models.enums import TaskStatus, TaskType, db_enum

if TYPE_CHECKING:
    from staydesk.models.property import Property
    from staydesk.models.booking import Booking
    from staydesk.models.user import User


class HousekeepingTask(Base):
    """A work item tied to a property and optionally to a booking.

    Any task not yet completed whose due date falls on a day puts the
    property in the "maintenance" state for that day (unless it is booked).
    """

    __tablename__ = "housekeeping_tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True, index=True
    )
    booking_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("bookings.id"), nullable=True
    )
    assigned_to: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )

    task_type: Mapped[TaskType] = mapped_column(db_enum(TaskType), nullable=False)
    status: Mapped[TaskStatus] = mapped_column(
        db_enum(TaskStatus), default=TaskStatus.PENDING, nullable=False, index=True
    )
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    property: Mapped[Optional["Property"]] = relationship(
        "Property", back_populates="housekeeping_tasks"
    )
    booking: Mapped[Optional["Booking"]] = relationship(
        "Booking", back_populates="housekeeping_tasks"
    )
    assigned_user: Mapped[Optional["User"]] = relationship(
        "User", back_populates="housekeeping_tasks"
    )
