"""
SubTracker Backend: Services Layer
=====================================

What:  Business logic between routes (HTTP) and record stores (persistence).
How:   Each service is constructed with the store it operates on and returns
       response schemas, so routes stay thin.

Service Inventory:
    - SubscriptionService: list / create / delete subscriptions
    - PaymentService: list / create payments, spending per subscription
"""
