"""
tests.conftest

Shared fixtures: a test-mode app on a throwaway SQLite file, seeded with the
sample cash cards, driven in-process through httpx's ASGI transport.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cashcard_service.api.app import create_app
from cashcard_service.auth.credentials import CredentialStore, demo_accounts
from cashcard_service.db.init_db import init_db, seed_sample_data
from cashcard_service.db.session import create_engine, create_sessionmaker
from cashcard_service.settings import Settings

SARAH = ("sarah1", "abc123")
KUMAR = ("kumar2", "xyz789")
HANK = ("hank-owns-no-cards", "qrs456")


@pytest.fixture(scope="session")
def credentials() -> CredentialStore:
    # Minimum bcrypt cost keeps the suite fast.
    return CredentialStore.from_plaintext(demo_accounts(), rounds=4)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cashcard.db'}",
        seed_sample_data=True,
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings: Settings, credentials: CredentialStore) -> FastAPI:
    return create_app(settings=settings, credentials=credentials)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx's ASGITransport does not run lifespan events; drive them explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest_asyncio.fixture
async def session_factory(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    factory = create_sessionmaker(engine)
    await seed_sample_data(factory)
    try:
        yield factory
    finally:
        await engine.dispose()
