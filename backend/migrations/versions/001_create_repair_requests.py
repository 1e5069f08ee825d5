"""Create repair_requests table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

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
    op.create_table(
        "repair_requests",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("receipt_number", sa.String(length=32), nullable=False),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("customer_phone", sa.String(), nullable=False),
        sa.Column("customer_email", sa.String(), nullable=False),
        sa.Column("article_name", sa.String(), nullable=False),
        sa.Column("article_type", sa.String(), nullable=False),
        sa.Column("article_brand", sa.String(), nullable=False),
        sa.Column("article_model", sa.String(), nullable=False),
        sa.Column("article_serialnumber", sa.String(), nullable=True),
        sa.Column("article_accesories", sa.String(), nullable=True),
        sa.Column("article_problem", sa.String(), nullable=False),
        # Stored as VARCHAR (native_enum=False on the model)
        sa.Column("repair_status", sa.String(length=32), nullable=False, server_default="pending"),
        sa.Column("repair_details", sa.String(), nullable=True),
        sa.Column("repair_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("received_at", sa.Date(), nullable=False),
        sa.Column("repaired_at", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_repair_requests_receipt_number", "repair_requests", ["receipt_number"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_repair_requests_receipt_number", table_name="repair_requests")
    op.drop_table("repair_requests")
