"""Payment and payment-intent schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from staydesk.schemas.base import BaseSchema, IDMixin, Money, TimestampMixin, reject_null
from staydesk.models.enums import PaymentMethod, PaymentStatus


class PaymentCreate(BaseSchema):
    """Record a payment against a booking."""

    booking_id: int
    amount: Money = Field(..., max_digits=10, decimal_places=2)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[PaymentMethod] = None
    stripe_payment_intent_id: Optional[str] = Field(None, max_length=255)
    processing_fee: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)


class PaymentUpdate(BaseSchema):
    """Partial payment update. The dashboard sends ``{status: ...}`` only."""

    amount: Optional[Money] = Field(None, max_digits=10, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    status: Optional[PaymentStatus] = None
    payment_method: Optional[PaymentMethod] = None
    stripe_payment_intent_id: Optional[str] = Field(None, max_length=255)
    processing_fee: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)

    @field_validator("amount", "currency", "status", mode="after")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class PaymentResponse(BaseSchema, IDMixin, TimestampMixin):
    booking_id: Optional[int] = None
    amount: Money
    currency: str
    status: PaymentStatus
    payment_method: Optional[PaymentMethod] = None
    stripe_payment_intent_id: Optional[str] = None
    processing_fee: Optional[Money] = None


class PaymentIntentRequest(BaseSchema):
    """Amount in major currency units; converted to cents for the processor."""

    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    booking_id: Optional[int] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)


class PaymentIntentResponse(BaseSchema):
    client_secret: str
