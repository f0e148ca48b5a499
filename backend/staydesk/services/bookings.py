"""Booking writes and the double-booking policy."""

import logging
from typing import Any, Optional

from staydesk.core.errors import ConflictError, ValidationError
from staydesk.models.booking import Booking
from staydesk.models.enums import BookingStatus
from staydesk.repositories import BookingRepository, PropertyRepository

logger = logging.getLogger(__name__)


class BookingService:
    """Creates and patches bookings.

    Overlapping stays on one property are allowed unless
    ``reject_double_bookings`` is set; the availability view simply reports
    such days as occupied.
    """

    def __init__(
        self,
        bookings: BookingRepository,
        properties: PropertyRepository,
        reject_double_bookings: bool = False,
    ):
        self.bookings = bookings
        self.properties = properties
        self.reject_double_bookings = reject_double_bookings

    async def _check_overlap(self, values: dict[str, Any], exclude_id: Optional[int] = None) -> None:
        if not self.reject_double_bookings:
            return
        if values.get("status") == BookingStatus.CANCELLED:
            return
        clashes = [
            b for b in await self.bookings.overlapping(
                values["check_in_date"], values["check_out_date"], [values["property_id"]]
            )
            if b.id != exclude_id
        ]
        if clashes:
            logger.warning(
                f"[BOOKINGS] Rejected overlap on property {values['property_id']} "
                f"with booking {clashes[0].id}"
            )
            raise ConflictError("Property is already booked for the requested dates")

    async def create(self, values: dict[str, Any]) -> Booking:
        await self.properties.get_or_404(values["property_id"])
        await self._check_overlap(values)
        booking = await self.bookings.create(values)
        logger.info(f"[BOOKINGS] Created booking {booking.id} for property {booking.property_id}")
        return booking

    async def update(self, booking_id: int, values: dict[str, Any]) -> Booking:
        booking = await self.bookings.get_or_404(booking_id)
        if values.get("property_id") is not None:
            await self.properties.get_or_404(values["property_id"])

        merged = {
            "property_id": values.get("property_id", booking.property_id),
            "check_in_date": values.get("check_in_date", booking.check_in_date),
            "check_out_date": values.get("check_out_date", booking.check_out_date),
            "status": values.get("status", booking.status),
        }
        if {"check_in_date", "check_out_date"} & values.keys():
            if merged["check_out_date"] <= merged["check_in_date"]:
                raise ValidationError("checkOutDate must be after checkInDate", field="checkOutDate")
        if {"property_id", "check_in_date", "check_out_date", "status"} & values.keys():
            await self._check_overlap(merged, exclude_id=booking_id)

        return await self.bookings.update(booking_id, values)
