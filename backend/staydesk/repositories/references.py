"""Existence checks for the weak foreign keys carried in write payloads."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.repositories.bookings import BookingRepository
from staydesk.repositories.properties import PropertyRepository
from staydesk.repositories.users import UserRepository

REFERENCES = {
    "property_id": PropertyRepository,
    "booking_id": BookingRepository,
    "assigned_to": UserRepository,
    "owner_id": UserRepository,
}


async def ensure_references(db: AsyncSession, values: dict[str, Any]) -> None:
    """Raise ``NotFoundError`` for any referenced id that has no row.

    ``None`` means "no reference" and is left alone.
    """
    for field, repository in REFERENCES.items():
        ref_id = values.get(field)
        if ref_id is not None:
            await repository(db).get_or_404(ref_id)
