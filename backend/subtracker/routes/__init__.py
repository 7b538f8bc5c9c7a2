"""
SubTracker Backend: API Routes Package
=========================================

Route Inventory:
    - subscriptions.py:  GET    /subscriptions
                         POST   /subscriptions
                         DELETE /subscriptions/{id}
    - payments.py:       GET    /payments
                         POST   /payments
                         GET    /payments/spending
    - health.py:         GET    /health

Routes are thin: they build a service over the request-scoped store and
return what it gives back.
"""
