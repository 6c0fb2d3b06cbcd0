"""
cashcard_service.db.models

Persistence schema for cash cards.

Responsibilities:
- Define the `CashCard` ORM model (id, amount, owner).
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import BigInteger, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from cashcard_service.db.base import Base

# 15 significant digits survive a round trip through an IEEE double, so amounts
# stay exact where NUMERIC is stored as REAL (SQLite) and in JSON output.
AMOUNT_PRECISION = 15
AMOUNT_SCALE = 2


class CashCard(Base):
    __tablename__ = "cash_cards"

    # BigInteger on server databases, plain INTEGER on SQLite so it stays the rowid.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True), nullable=False
    )
    owner: Mapped[str] = mapped_column(String(256), nullable=False)

    __table_args__ = (
        Index("ix_cash_cards_owner_amount", "owner", "amount"),
        # Without AUTOINCREMENT SQLite may hand out the id of a deleted max row again.
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"CashCard(id={self.id!r}, amount={self.amount!r}, owner={self.owner!r})"
