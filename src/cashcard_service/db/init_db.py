"""
cashcard_service.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
- Seed the sample cash cards used by the demo principals.
- Keep server-side id sequences ahead of the seeded ids.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import TextClause, func, select, text
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from cashcard_service.db.base import Base
from cashcard_service.db.models import CashCard

SAMPLE_CASH_CARDS: tuple[tuple[int, Decimal, str], ...] = (
    (99, Decimal("123.45"), "sarah1"),
    (100, Decimal("1.00"), "sarah1"),
    (101, Decimal("150.00"), "sarah1"),
    (102, Decimal("200.00"), "kumar2"),
)


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production relies on the Alembic migrations under `alembic/versions`.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def id_sequence_sync_statement(dialect: Dialect) -> TextClause | None:
    """
    Statement that moves the `cash_cards.id` sequence past the highest stored id.

    Explicit ids do not advance a PostgreSQL sequence, so without this the next
    insert after seeding would collide with card 99. SQLite derives the next
    rowid from the table itself and needs nothing.
    """

    if dialect.name != "postgresql":
        return None
    table = CashCard.__tablename__
    return text(
        f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
        f"(SELECT MAX(id) FROM {table}))"
    )


async def seed_sample_data(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """Insert `SAMPLE_CASH_CARDS` into an empty table; returns the number of rows added."""

    async with session_factory() as session:
        existing = await session.scalar(select(func.count()).select_from(CashCard))
        if existing:
            return 0
        session.add_all(
            CashCard(id=card_id, amount=amount, owner=owner)
            for card_id, amount, owner in SAMPLE_CASH_CARDS
        )
        await session.flush()
        sync = id_sequence_sync_statement(session.get_bind().dialect)
        if sync is not None:
            await session.execute(sync)
        await session.commit()
    return len(SAMPLE_CASH_CARDS)
