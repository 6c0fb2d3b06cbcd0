"""
cashcard_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and services.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cashcard_service.services.cash_card_service import CashCardService
from cashcard_service.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app's own settings, which may differ from the env-derived defaults in tests.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `cashcard_service.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commits are issued by the service layer.
    async with session_factory() as session:
        yield session


def cash_card_service(session: AsyncSession = Depends(db_session)) -> CashCardService:
    return CashCardService(session=session)
