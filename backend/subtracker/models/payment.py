"""
SubTracker Backend: Payment SQLAlchemy Model
===============================================

What:  ORM model for the `payments` table.
Who:   Written by PaymentService.create; scanned by the spending aggregation.

Table Design:
    - subscription_name is matched against Subscription.name by string only;
      there is no foreign key
    - date holds the ISO date (YYYY-MM-DD) set by the server at creation
    - Rows are immutable: no update or delete path exists
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from subtracker.database import Base


class Payment(Base):
    """A single charge recorded against a subscription name."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    subscription_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Name of the subscription this charge belongs to",
    )

    amount: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Charged amount",
    )

    date: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Server date at creation (ISO 8601, YYYY-MM-DD)",
    )

    def __repr__(self) -> str:
        return (
            f"<Payment(id={self.id}, subscription_name='{self.subscription_name}', "
            f"amount={self.amount}, date='{self.date}')>"
        )
