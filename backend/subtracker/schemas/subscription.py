"""
SubTracker Backend: Subscription Schemas
===========================================

What:  Request and response bodies for /subscriptions.
Why:   `id` is server-assigned, so the create body has no id field; an id
       sent by the client is ignored like any other unknown key.
"""

from pydantic import Field

from subtracker.schemas.common import ApiModel


class SubscriptionCreate(ApiModel):
    """Body of POST /subscriptions. No range or format checks are applied."""
    name: str = Field(description="Display name")
    billing_cycle: str = Field(description="Billing cycle label, e.g. monthly")
    amount: float = Field(description="Charge per cycle")
    next_payment_date: str = Field(description="Date of the next charge, free text")


class SubscriptionResponse(SubscriptionCreate):
    """A stored subscription, as returned by GET and POST /subscriptions."""
    id: int = Field(description="Server-assigned identifier")
