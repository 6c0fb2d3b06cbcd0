"""
cashcard_service.api.app

FastAPI app factory for the Cash Card service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Build the immutable credential store used by the access policy.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cashcard_service import __version__
from cashcard_service.api.routers.cash_cards import build_router
from cashcard_service.api.routers.health import router as health_router
from cashcard_service.auth.credentials import CredentialStore, demo_accounts
from cashcard_service.db.init_db import init_db, seed_sample_data
from cashcard_service.db.session import create_engine, create_sessionmaker
from cashcard_service.observability.logging import configure_logging, get_logger
from cashcard_service.observability.middleware import RequestContextMiddleware
from cashcard_service.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, credentials: CredentialStore | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    if credentials is None:
        credentials = CredentialStore.from_plaintext(demo_accounts(), rounds=settings.bcrypt_rounds)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema is owned by Alembic migrations.
            await init_db(engine)
        if settings.seed_sample_data:
            seeded = await seed_sample_data(app.state.sessionmaker)
            log.info("sample_data_seeded", rows=seeded)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Cash Card Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.credentials = credentials

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(build_router())

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; per-verb logic lives in `api.routers.cash_cards`
# and `services.cash_card_service`.
