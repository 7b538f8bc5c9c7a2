"""Create subscriptions and payments tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates the two independent record tables. Payments refer to
       subscriptions by name only, so there is no foreign key.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Display name of the subscription",
        ),
        sa.Column(
            "billing_cycle",
            sa.String(255),
            nullable=False,
            comment="Free-text billing cycle label, e.g. monthly",
        ),
        sa.Column(
            "amount",
            sa.Float(),
            nullable=False,
            comment="Charge per cycle; no currency tracked",
        ),
        sa.Column(
            "next_payment_date",
            sa.String(255),
            nullable=False,
            comment="Textual date of the next charge",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "subscription_name",
            sa.String(255),
            nullable=False,
            comment="Name of the subscription this charge belongs to",
        ),
        sa.Column(
            "amount",
            sa.Float(),
            nullable=False,
            comment="Charged amount",
        ),
        sa.Column(
            "date",
            sa.String(10),
            nullable=False,
            comment="Server date at creation (ISO 8601, YYYY-MM-DD)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_table("subscriptions")
