"""Payments router, including Stripe payment intents."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.config import get_settings
from staydesk.core.database import get_db
from staydesk.models.enums import PaymentStatus
from staydesk.repositories import PaymentRepository, ensure_references
from staydesk.schemas.payment import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentResponse,
    PaymentUpdate,
)
from staydesk.services.payments import PaymentService, StripeGateway

router = APIRouter(prefix="/payments", tags=["payments"])
intent_router = APIRouter(tags=["payments"])


def get_stripe_gateway() -> StripeGateway:
    settings = get_settings()
    return StripeGateway(settings.stripe_secret_key, settings.default_currency)


@router.get("", response_model=List[PaymentResponse])
async def list_payments(
    booking_id: Optional[int] = Query(None, alias="bookingId"),
    status_filter: Optional[PaymentStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    payments = await PaymentRepository(db).list(booking_id=booking_id, status=status_filter)
    return [PaymentResponse.model_validate(p) for p in payments]


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    payment = await PaymentRepository(db).get_or_404(payment_id)
    return PaymentResponse.model_validate(payment)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(data: PaymentCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    await ensure_references(db, values)
    payment = await PaymentRepository(db).create(values)
    return PaymentResponse.model_validate(payment)


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: int,
    data: PaymentUpdate,
    db: AsyncSession = Depends(get_db),
):
    values = data.model_dump(exclude_unset=True)
    await ensure_references(db, values)
    payment = await PaymentRepository(db).update(payment_id, values)
    return PaymentResponse.model_validate(payment)


@router.post("/{payment_id}/refund", response_model=PaymentResponse)
async def refund_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    """Completed -> refunded."""
    payment = await PaymentService(PaymentRepository(db)).refund(payment_id)
    return PaymentResponse.model_validate(payment)


@router.post("/{payment_id}/retry", response_model=PaymentResponse)
async def retry_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    """Failed -> pending."""
    payment = await PaymentService(PaymentRepository(db)).retry(payment_id)
    return PaymentResponse.model_validate(payment)


@intent_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    data: PaymentIntentRequest,
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    """Create a Stripe PaymentIntent and hand its client secret to the browser."""
    client_secret = await gateway.create_payment_intent(
        data.amount, currency=data.currency, booking_id=data.booking_id
    )
    return PaymentIntentResponse(client_secret=client_secret)
