"""Message schemas."""

from typing import Optional

from pydantic import EmailStr, Field

from staydesk.schemas.base import BaseSchema, IDMixin, TimestampMixin
from staydesk.models.enums import MessageSender, MessageSource


class MessageCreate(BaseSchema):
    """Record an inbound or outbound message."""

    booking_id: Optional[int] = None
    property_id: Optional[int] = None
    sender: MessageSender
    sender_name: Optional[str] = Field(None, max_length=255)
    sender_email: Optional[EmailStr] = None
    message: str = Field(..., min_length=1)
    is_read: bool = False
    source: MessageSource = MessageSource.DIRECT
    external_message_id: Optional[str] = Field(None, max_length=255)


class MessageResponse(BaseSchema, IDMixin, TimestampMixin):
    booking_id: Optional[int] = None
    property_id: Optional[int] = None
    sender: MessageSender
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    message: str
    is_read: bool
    source: MessageSource
    external_message_id: Optional[str] = None
