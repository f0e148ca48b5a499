"""Guest communication model."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydesk.core.database import Base, utcnow
from staydesk.models.enums import MessageSender, MessageSource, db_enum

if TYPE_CHECKING:
    from staydesk.models.booking import Booking
    from staydesk.models.property import Property


class Message(Base):
    """One inbound or outbound message. ``is_read`` flips once via mark-read."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    booking_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("bookings.id"), nullable=True, index=True
    )
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True, index=True
    )

    sender: Mapped[MessageSender] = mapped_column(db_enum(MessageSender), nullable=False)
    sender_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    sender_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    source: Mapped[MessageSource] = mapped_column(
        db_enum(MessageSource), default=MessageSource.DIRECT, nullable=False
    )
    external_message_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)

    booking: Mapped[Optional["Booking"]] = relationship("Booking", back_populates="messages")
    property: Mapped[Optional["Property"]] = relationship("Property", back_populates="messages")
