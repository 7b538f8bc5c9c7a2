"""
SubTracker Backend: Payment Service
======================================

What:  Payment history, payment confirmation and spending per subscription.
Who:   Called by the /payments route handlers.

Payment dates:
    The server stamps every new payment with its own current date. Any date
    the client sends is never read. The clock is injectable so tests can
    pin "today".

Spending aggregation:
    A full scan of the payment store, grouped by exact subscription name
    (case-sensitive, untrimmed) and summed with float addition. Names with
    no payments are absent from the result, not zero.
"""

import logging
from datetime import date
from typing import Callable, Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from subtracker.exceptions import DatabaseError
from subtracker.models.payment import Payment
from subtracker.schemas.payment import PaymentCreate, PaymentResponse
from subtracker.stores.base import RecordStore

logger = logging.getLogger(__name__)


def sum_by_subscription(payments: Iterable[Payment]) -> Dict[str, float]:
    """
    Sum payment amounts per subscription name.

    Example:
        Two Netflix payments of 15.99 and one Spotify payment of 9.99
        give {"Netflix": 31.98, "Spotify": 9.99}.
    """
    totals: Dict[str, float] = {}
    for payment in payments:
        name = payment.subscription_name
        totals[name] = totals.get(name, 0.0) + payment.amount
    return totals


class PaymentService:
    """
    Payment operations over an explicitly supplied store.

    Args:
        store: Persistence for Payment records
        today: Clock returning the server's current date
    """

    def __init__(
        self,
        store: RecordStore[Payment],
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.today = today

    async def _find_all(self) -> List[Payment]:
        try:
            return await self.store.find_all()
        except SQLAlchemyError as e:
            logger.error("Database error reading payments: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve payments. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def list(self) -> List[PaymentResponse]:
        """Every stored payment, in store order."""
        return [PaymentResponse.model_validate(record) for record in await self._find_all()]

    async def create(self, data: PaymentCreate) -> PaymentResponse:
        """Record a payment dated with the server's current date."""
        record = Payment(
            subscription_name=data.subscription_name,
            amount=data.amount,
            date=self.today().isoformat(),
        )
        try:
            record = await self.store.save(record)
        except SQLAlchemyError as e:
            logger.error(
                "Database error recording payment for '%s': %s",
                data.subscription_name,
                str(e),
            )
            raise DatabaseError(
                message="Could not save the payment. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info(
            "Payment recorded: id=%s subscription='%s' amount=%s date=%s",
            record.id,
            record.subscription_name,
            record.amount,
            record.date,
        )
        return PaymentResponse.model_validate(record)

    async def spending_by_subscription(self) -> Dict[str, float]:
        """Total paid per subscription name. Read-only."""
        return sum_by_subscription(await self._find_all())
