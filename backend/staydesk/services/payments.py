"""
Payment state transitions and Stripe payment intents.

Refund and retry are the only guarded transitions; plain updates patch the
record as given.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import stripe
from fastapi.concurrency import run_in_threadpool

from staydesk.core.errors import ConflictError, PaymentProcessorError, PaymentProcessorUnavailable
from staydesk.models.enums import PaymentStatus
from staydesk.models.payment import Payment
from staydesk.repositories import PaymentRepository

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Major currency units to cents, rounded half up."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentService:
    def __init__(self, payments: PaymentRepository):
        self.payments = payments

    async def _transition(self, payment_id: int, allowed_from: PaymentStatus, to: PaymentStatus) -> Payment:
        payment = await self.payments.get_or_404(payment_id)
        if payment.status != allowed_from:
            raise ConflictError(
                f"Payment is {payment.status.value}; only {allowed_from.value} payments can move to {to.value}"
            )
        logger.info(f"[PAYMENTS] Payment {payment_id}: {payment.status.value} -> {to.value}")
        return await self.payments.update(payment_id, {"status": to})

    async def refund(self, payment_id: int) -> Payment:
        return await self._transition(payment_id, PaymentStatus.COMPLETED, PaymentStatus.REFUNDED)

    async def retry(self, payment_id: int) -> Payment:
        return await self._transition(payment_id, PaymentStatus.FAILED, PaymentStatus.PENDING)


class StripeGateway:
    """Creates Stripe PaymentIntents with the configured secret key."""

    def __init__(self, api_key: Optional[str], default_currency: str = "usd"):
        self.api_key = api_key
        self.default_currency = default_currency

    async def create_payment_intent(
        self,
        amount: Decimal,
        currency: Optional[str] = None,
        booking_id: Optional[int] = None,
    ) -> str:
        """Return the client secret of a new PaymentIntent."""
        if not self.api_key:
            raise PaymentProcessorUnavailable("Payment processing is not configured")

        metadata = {"bookingId": str(booking_id)} if booking_id is not None else {}
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                api_key=self.api_key,
                amount=to_minor_units(amount),
                currency=(currency or self.default_currency).lower(),
                metadata=metadata,
            )
        except stripe.StripeError as e:
            logger.error(f"[PAYMENTS] Stripe error creating intent: {e}")
            raise PaymentProcessorError("Error creating payment intent") from e

        logger.info(f"[PAYMENTS] Created payment intent {intent.id} for booking {booking_id}")
        return intent.client_secret
