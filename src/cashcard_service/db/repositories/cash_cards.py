"""
cashcard_service.db.repositories.cash_cards

Repository for `CashCard` entities.

Responsibilities:
- Point and owner-scoped lookups, existence checks and paged listing.
- Insert, amount replacement and owner-scoped delete.

Every method the API uses takes `owner` as a required keyword, so a query
that forgets the caller's identity does not type-check.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from cashcard_service.db.models import CashCard
from cashcard_service.db.paging import Direction, PageRequest, SortOrder

SORTABLE_COLUMNS = {
    "id": CashCard.id,
    "amount": CashCard.amount,
    "owner": CashCard.owner,
}


class CashCardRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, card_id: int) -> CashCard | None:
        return await self._session.get(CashCard, card_id)

    async def get_owned(self, card_id: int, *, owner: str) -> CashCard | None:
        stmt = select(CashCard).where(CashCard.id == card_id, CashCard.owner == owner)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def exists_owned(self, card_id: int, *, owner: str) -> bool:
        stmt = select(exists().where(CashCard.id == card_id, CashCard.owner == owner))
        return bool(await self._session.scalar(stmt))

    async def list_owned(self, *, owner: str, page: PageRequest) -> list[CashCard]:
        stmt = (
            select(CashCard)
            .where(CashCard.owner == owner)
            .order_by(*_order_by(page.sort))
            .offset(page.offset)
            .limit(page.size)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def create(self, *, owner: str, amount: Decimal) -> CashCard:
        card = CashCard(amount=amount, owner=owner)
        self._session.add(card)
        # Flush so the database-assigned id is available before commit.
        await self._session.flush()
        return card

    async def replace(self, card: CashCard, *, amount: Decimal) -> CashCard:
        # id and owner are never reassigned after creation.
        card.amount = amount
        await self._session.flush()
        return card

    async def delete_owned(self, card_id: int, *, owner: str) -> int:
        stmt = delete(CashCard).where(CashCard.id == card_id, CashCard.owner == owner)
        result = await self._session.execute(stmt)
        return result.rowcount or 0


def _order_by(sort: tuple[SortOrder, ...]) -> list:
    clauses = []
    for order in sort:
        column = SORTABLE_COLUMNS[order.field]
        clauses.append(column.desc() if order.direction == Direction.desc else column.asc())
    # id breaks ties so equal amounts page deterministically.
    if not any(order.field == "id" for order in sort):
        clauses.append(CashCard.id.asc())
    return clauses


# --- Module Notes -----------------------------------------------------------
# Sort fields are validated against SORTABLE_COLUMNS by `db.paging.parse_sort`
# before a PageRequest reaches this module.
