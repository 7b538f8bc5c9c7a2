"""
SubTracker Backend: Subscription SQLAlchemy Model
====================================================

What:  ORM model for the `subscriptions` table.
Who:   Persisted through a RecordStore by SubscriptionService; read by Alembic.

Table Design:
    - Integer autoincrement primary key, assigned by the database on insert
    - billing_cycle and next_payment_date are free text; no enumeration or
      calendar validation is applied
    - amount is a plain float with no currency unit
    - No relationship to payments: payments refer to a subscription by name
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from subtracker.database import Base


class Subscription(Base):
    """
    A recurring billing agreement.

    Lifecycle:
        Created with all fields client-supplied except `id`, never updated
        in place, deleted by id.
    """

    __tablename__ = "subscriptions"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the subscription",
    )

    billing_cycle: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Free-text billing cycle label, e.g. monthly",
    )

    amount: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Charge per cycle; no currency tracked",
    )

    next_payment_date: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Textual date of the next charge",
    )

    def __repr__(self) -> str:
        return (
            f"<Subscription(id={self.id}, name='{self.name}', "
            f"amount={self.amount})>"
        )
