"""
SubTracker Backend: Payment Schemas
======================================

What:  Request and response bodies for /payments.
"""

from pydantic import Field

from subtracker.schemas.common import ApiModel


class PaymentCreate(ApiModel):
    """
    Body of POST /payments.

    Only the subscription name and amount are read. A `date` key in the
    request is dropped: the server always stamps the current date.
    """
    subscription_name: str = Field(description="Name of the subscription being paid")
    amount: float = Field(description="Charged amount")


class PaymentResponse(PaymentCreate):
    """A stored payment, including the server-set date."""
    id: int = Field(description="Server-assigned identifier")
    date: str = Field(description="Creation date set by the server (YYYY-MM-DD)")
