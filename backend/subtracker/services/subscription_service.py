"""
SubTracker Backend: Subscription Service
===========================================

What:  List, create and delete subscriptions.
How:   Direct pass-through to a RecordStore[Subscription]; no field
       validation beyond the schema types.
Who:   Called by the /subscriptions route handlers.

Deleting an id that does not exist is a silent success: the store reports
whether a row was removed, and the service only logs it.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from subtracker.exceptions import DatabaseError
from subtracker.models.subscription import Subscription
from subtracker.schemas.subscription import SubscriptionCreate, SubscriptionResponse
from subtracker.stores.base import RecordStore

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Subscription operations over an explicitly supplied store.

    Args:
        store: Persistence for Subscription records
    """

    def __init__(self, store: RecordStore[Subscription]):
        self.store = store

    async def list(self) -> List[SubscriptionResponse]:
        """Every stored subscription, in store order, unfiltered."""
        try:
            records = await self.store.find_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing subscriptions: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve subscriptions. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return [SubscriptionResponse.model_validate(record) for record in records]

    async def create(self, data: SubscriptionCreate) -> SubscriptionResponse:
        """
        Persist a new subscription and return it with its assigned id.

        All four fields are stored exactly as supplied; a zero or negative
        amount is accepted.
        """
        record = Subscription(
            name=data.name,
            billing_cycle=data.billing_cycle,
            amount=data.amount,
            next_payment_date=data.next_payment_date,
        )
        try:
            record = await self.store.save(record)
        except SQLAlchemyError as e:
            logger.error("Database error creating subscription '%s': %s", data.name, str(e))
            raise DatabaseError(
                message="Could not save the subscription. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Subscription created: id=%s name='%s'", record.id, record.name)
        return SubscriptionResponse.model_validate(record)

    async def delete(self, subscription_id: int) -> None:
        """Remove the subscription with the given id, if it exists."""
        try:
            removed = await self.store.delete_by_id(subscription_id)
        except SQLAlchemyError as e:
            logger.error(
                "Database error deleting subscription %s: %s", subscription_id, str(e)
            )
            raise DatabaseError(
                message="Could not delete the subscription. Please try again.",
                context={"subscription_id": subscription_id},
            ) from e

        if removed:
            logger.info("Subscription deleted: id=%s", subscription_id)
        else:
            logger.debug("Delete of unknown subscription id=%s ignored", subscription_id)
