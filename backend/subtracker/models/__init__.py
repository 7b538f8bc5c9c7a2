"""
SubTracker Backend: ORM Models
=================================

Importing this package registers every table on `Base.metadata`
(used by Alembic autogenerate and by the test schema setup).
"""

from subtracker.models.payment import Payment
from subtracker.models.subscription import Subscription

__all__ = ["Payment", "Subscription"]
