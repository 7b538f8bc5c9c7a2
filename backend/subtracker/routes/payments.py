"""
SubTracker Backend: Payment Route Handlers
=============================================

What:  Payment confirmation, payment history and spending per subscription
       (the data behind the dashboard pie chart).
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from subtracker.database import get_db_session
from subtracker.models.payment import Payment
from subtracker.schemas.common import ErrorResponse
from subtracker.schemas.payment import PaymentCreate, PaymentResponse
from subtracker.services.payment_service import PaymentService
from subtracker.stores.sql import SqlRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["Payments"])


def get_payment_service(
    db: AsyncSession = Depends(get_db_session),
) -> PaymentService:
    """Builds the service for one request."""
    return PaymentService(SqlRecordStore(Payment, db))


@router.post(
    "",
    status_code=201,
    response_model=PaymentResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Confirm a payment",
    description=(
        "Records a payment for a subscription name. The payment date is always "
        "the server's current date; a date in the request body is ignored."
    ),
)
async def create_payment(
    body: PaymentCreate,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse:
    return await service.create(body)


@router.get(
    "",
    response_model=List[PaymentResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Payment history",
)
async def list_payments(
    service: PaymentService = Depends(get_payment_service),
) -> List[PaymentResponse]:
    return await service.list()


@router.get(
    "/spending",
    response_model=Dict[str, float],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Spending grouped by subscription",
    description=(
        "Sum of payment amounts per subscription name. Subscriptions without "
        "payments are omitted; an empty history returns {}."
    ),
)
async def spending_by_subscription(
    service: PaymentService = Depends(get_payment_service),
) -> Dict[str, float]:
    return await service.spending_by_subscription()
