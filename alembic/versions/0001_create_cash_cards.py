"""Create cash_cards table

Revision ID: 0001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "cash_cards",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("owner", sa.String(256), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_cash_cards_owner_amount", "cash_cards", ["owner", "amount"])


def downgrade() -> None:
    op.drop_index("ix_cash_cards_owner_amount", table_name="cash_cards")
    op.drop_table("cash_cards")
