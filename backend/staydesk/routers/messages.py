"""Guest messages router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.repositories import MessageRepository, ensure_references
from staydesk.schemas.message import MessageCreate, MessageResponse

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    booking_id: Optional[int] = Query(None, alias="bookingId"),
    property_id: Optional[int] = Query(None, alias="propertyId"),
    db: AsyncSession = Depends(get_db),
):
    messages = await MessageRepository(db).list(booking_id=booking_id, property_id=property_id)
    return [MessageResponse.model_validate(m) for m in messages]


@router.get("/unread", response_model=List[MessageResponse])
async def list_unread_messages(db: AsyncSession = Depends(get_db)):
    messages = await MessageRepository(db).unread()
    return [MessageResponse.model_validate(m) for m in messages]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: int, db: AsyncSession = Depends(get_db)):
    message = await MessageRepository(db).get_or_404(message_id)
    return MessageResponse.model_validate(message)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(data: MessageCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    await ensure_references(db, values)
    message = await MessageRepository(db).create(values)
    return MessageResponse.model_validate(message)


@router.put("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(message_id: int, db: AsyncSession = Depends(get_db)):
    """Mark as read. Repeating the call is a no-op."""
    message = await MessageRepository(db).mark_read(message_id)
    return MessageResponse.model_validate(message)
