"""Create customer table.

Revision ID: 001
Revises:
Create Date: 2025-07-02

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the customer table with a unique email."""
    op.create_table(
        "customer",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("gender", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_customer")),
        sa.UniqueConstraint("email", name=op.f("uq_customer_email")),
        sa.CheckConstraint(
            "age > 0 AND age <= 150", name=op.f("ck_customer_age_range")
        ),
        sa.CheckConstraint(
            "gender IN ('MALE', 'FEMALE')", name=op.f("ck_customer_gender")
        ),
    )


def downgrade() -> None:
    """Drop the customer table."""
    op.drop_table("customer")
