"""Payment repository."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select

from staydesk.models.enums import PaymentStatus
from staydesk.models.payment import Payment
from staydesk.repositories.base import SqlRepository

CENT = Decimal("0.01")


class PaymentRepository(SqlRepository[Payment]):
    model = Payment
    default_order = (Payment.created_at.desc(), Payment.id.desc())

    async def sum_completed_between(self, start: datetime, end: datetime) -> Decimal:
        """Sum of completed payment amounts created in ``[start, end)``."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Payment.amount), 0)).where(
                Payment.status == PaymentStatus.COMPLETED,
                Payment.created_at >= start,
                Payment.created_at < end,
            )
        )
        total = result.scalar()
        return Decimal(str(total or 0)).quantize(CENT)
