"""Property schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from staydesk.schemas.base import BaseSchema, IDMixin, Money, TimestampMixin, reject_null
from staydesk.models.enums import AvailabilityStatus


class PropertyCreate(BaseSchema):
    """Create a new property."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    type: str = Field(..., min_length=1, max_length=50)

    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    max_guests: int = Field(..., ge=1)

    base_price: Money = Field(..., ge=0, max_digits=10, decimal_places=2)
    cleaning_fee: Money = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)

    owner_id: Optional[int] = None
    images: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    is_active: bool = True

    airbnb_id: Optional[str] = Field(None, max_length=100)
    booking_com_id: Optional[str] = Field(None, max_length=100)
    vrbo_id: Optional[str] = Field(None, max_length=100)


class PropertyUpdate(BaseSchema):
    """Partial property update."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    max_guests: Optional[int] = Field(None, ge=1)
    base_price: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)
    cleaning_fee: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)
    owner_id: Optional[int] = None
    images: Optional[list[str]] = None
    amenities: Optional[list[str]] = None
    is_active: Optional[bool] = None
    airbnb_id: Optional[str] = Field(None, max_length=100)
    booking_com_id: Optional[str] = Field(None, max_length=100)
    vrbo_id: Optional[str] = Field(None, max_length=100)

    @field_validator(
        "name", "address", "type", "bedrooms", "bathrooms", "max_guests",
        "base_price", "is_active",
        mode="after",
    )
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class PropertyResponse(BaseSchema, IDMixin, TimestampMixin):
    """Property response."""

    name: str
    address: str
    description: Optional[str] = None
    type: str
    bedrooms: int
    bathrooms: int
    max_guests: int
    base_price: Money
    cleaning_fee: Optional[Money] = None
    owner_id: Optional[int] = None
    images: Optional[list[str]] = None
    amenities: Optional[list[str]] = None
    is_active: bool
    airbnb_id: Optional[str] = None
    booking_com_id: Optional[str] = None
    vrbo_id: Optional[str] = None


class PropertyAvailability(BaseSchema):
    """Derived status of one property on one day."""

    property_id: int
    date: date
    status: AvailabilityStatus


class PropertyCalendar(BaseSchema):
    property_id: int
    start_date: date
    end_date: date
    days: list[PropertyAvailability]
