"""
SubTracker Backend: Subscription Route Handlers
==================================================

What:  Dashboard listing, adding and removing subscriptions.
How:   Each request gets a SubscriptionService over a SqlRecordStore bound to
       the request's database session.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from subtracker.database import get_db_session
from subtracker.models.subscription import Subscription
from subtracker.schemas.common import ErrorResponse
from subtracker.schemas.subscription import SubscriptionCreate, SubscriptionResponse
from subtracker.services.subscription_service import SubscriptionService
from subtracker.stores.sql import SqlRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


def get_subscription_service(
    db: AsyncSession = Depends(get_db_session),
) -> SubscriptionService:
    """Builds the service for one request."""
    return SubscriptionService(SqlRecordStore(Subscription, db))


@router.get(
    "",
    response_model=List[SubscriptionResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all subscriptions",
)
async def list_subscriptions(
    service: SubscriptionService = Depends(get_subscription_service),
) -> List[SubscriptionResponse]:
    return await service.list()


@router.post(
    "",
    status_code=201,
    response_model=SubscriptionResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Add a subscription",
    description="Stores the subscription as given and returns it with its assigned id.",
)
async def create_subscription(
    body: SubscriptionCreate,
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    return await service.create(body)


@router.delete(
    "/{subscription_id}",
    status_code=204,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a subscription",
    description="Removes the subscription. Unknown ids also return 204.",
)
async def delete_subscription(
    subscription_id: int,
    service: SubscriptionService = Depends(get_subscription_service),
) -> None:
    await service.delete(subscription_id)
