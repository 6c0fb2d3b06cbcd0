"""
cashcard_service.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Convert HTTP Basic credentials into a typed `Principal`.
- Enforce role checks via reusable dependency factories.
"""

from __future__ import annotations

import structlog
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from cashcard_service.auth.credentials import CredentialStore
from cashcard_service.auth.models import Principal
from cashcard_service.observability.logging import get_logger

log = get_logger(__name__)

_basic = HTTPBasic(auto_error=False)


def credential_store_from_app(request: Request) -> CredentialStore:
    # The store is built once in `cashcard_service.api.app.create_app`.
    return request.app.state.credentials  # type: ignore[attr-defined]


def _unauthenticated() -> HTTPException:
    # Same response whichever part of the credentials was wrong.
    return HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Basic"},
    )


async def get_principal(
    creds: HTTPBasicCredentials | None = Depends(_basic),
    store: CredentialStore = Depends(credential_store_from_app),
) -> Principal:
    if creds is None:
        raise _unauthenticated()

    # bcrypt is CPU-bound; keep it off the event loop.
    principal = await run_in_threadpool(store.verify, creds.username, creds.password)
    if principal is None:
        log.info("authentication_failed", username=creds.username)
        raise _unauthenticated()

    structlog.contextvars.bind_contextvars(principal=principal.subject)
    return principal


def require_roles(*required: str):
    required_set = frozenset(required)

    def _dep(principal: Principal = Depends(get_principal)) -> Principal:
        missing = sorted(role for role in required_set if not principal.has_role(role))
        if missing:
            log.info("authorization_denied", missing=missing)
            raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Insufficient role")
        return principal

    return _dep


# --- Module Notes -----------------------------------------------------------
# FastAPI caches `get_principal` per request, so the router-level role gate and
# the endpoint's own `Depends(get_principal)` share a single bcrypt check.
