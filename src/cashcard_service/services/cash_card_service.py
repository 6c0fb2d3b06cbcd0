"""
cashcard_service.services.cash_card_service

Owner-scoped cash card operations (transaction + persistence owner).

Responsibilities:
- Run each operation against the repository scoped to the caller.
- Commit once per mutating operation and log the mutation.

Outcomes are returned as values (None / False for "not found or not yours");
mapping them to HTTP responses is the router's job.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from cashcard_service.db.models import CashCard
from cashcard_service.db.paging import PageRequest
from cashcard_service.db.repositories.cash_cards import CashCardRepo
from cashcard_service.observability.logging import get_logger

log = get_logger(__name__)


class CashCardService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._cards = CashCardRepo(session)

    async def find(self, *, owner: str, card_id: int) -> CashCard | None:
        return await self._cards.get_owned(card_id, owner=owner)

    async def list_page(self, *, owner: str, page: PageRequest) -> list[CashCard]:
        return await self._cards.list_owned(owner=owner, page=page)

    async def create(self, *, owner: str, amount: Decimal) -> CashCard:
        card = await self._cards.create(owner=owner, amount=amount)
        await self._session.commit()
        log.info("cash_card_created", card_id=card.id)
        return card

    async def update_amount(self, *, owner: str, card_id: int, amount: Decimal) -> bool:
        card = await self._cards.get_owned(card_id, owner=owner)
        if card is None:
            return False
        await self._cards.replace(card, amount=amount)
        await self._session.commit()
        log.info("cash_card_updated", card_id=card_id)
        return True

    async def delete(self, *, owner: str, card_id: int) -> bool:
        if not await self._cards.exists_owned(card_id, owner=owner):
            return False
        await self._cards.delete_owned(card_id, owner=owner)
        await self._session.commit()
        log.info("cash_card_deleted", card_id=card_id)
        return True
