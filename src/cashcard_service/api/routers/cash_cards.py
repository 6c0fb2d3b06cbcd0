"""
cashcard_service.api.routers.cash_cards

Owner-scoped CRUD endpoints under `/cashcards`.

Responsibilities:
- Bind path/query/body parameters and the caller's `Principal`.
- Delegate to `CashCardService` scoped to the caller.
- Map outcomes to status codes (200/201/204/404).

Dispatch is declared in `CASH_CARD_ROUTES`, a plain tuple of `RouteSpec`
entries that `build_router` registers on an `APIRouter`. The whole router is
gated on the `card-owner` role.

Reads, updates and deletes answer 404 with an empty body both when the id is
absent and when it belongs to someone else. Listing only ever sees the
caller's rows and therefore never needs that conflation.

Requests under the prefix that match no table entry hit a gated catch-all,
so they are authenticated before anyone learns the path or method is unknown.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)

from cashcard_service.api.deps import cash_card_service, settings_dep
from cashcard_service.api.schemas import CashCardAmount, CashCardOut
from cashcard_service.auth.deps import get_principal, require_roles
from cashcard_service.auth.models import CARD_OWNER, Principal
from cashcard_service.db.paging import (
    Direction,
    InvalidSortError,
    PageRequest,
    SortOrder,
    parse_sort,
)
from cashcard_service.db.repositories.cash_cards import SORTABLE_COLUMNS
from cashcard_service.services.cash_card_service import CashCardService
from cashcard_service.settings import Settings

PREFIX = "/cashcards"

DEFAULT_SORT: tuple[SortOrder, ...] = (SortOrder(field="amount", direction=Direction.asc),)


def _not_found() -> Response:
    return Response(status_code=HTTP_404_NOT_FOUND)


async def get_cash_card(
    card_id: int,
    principal: Principal = Depends(get_principal),
    service: CashCardService = Depends(cash_card_service),
) -> CashCardOut | Response:
    card = await service.find(owner=principal.subject, card_id=card_id)
    if card is None:
        return _not_found()
    return CashCardOut.model_validate(card)


async def create_cash_card(
    request: Request,
    body: CashCardAmount,
    principal: Principal = Depends(get_principal),
    service: CashCardService = Depends(cash_card_service),
) -> Response:
    card = await service.create(owner=principal.subject, amount=body.amount)
    location = request.url_for("get_cash_card", card_id=str(card.id))
    return Response(status_code=HTTP_201_CREATED, headers={"Location": str(location)})


async def list_cash_cards(
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, ge=1),
    sort: list[str] | None = Query(default=None),
    principal: Principal = Depends(get_principal),
    service: CashCardService = Depends(cash_card_service),
    settings: Settings = Depends(settings_dep),
) -> list[CashCardOut]:
    try:
        orders = parse_sort(sort or (), allowed=SORTABLE_COLUMNS)
    except InvalidSortError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e

    page_size = min(size or settings.default_page_size, settings.max_page_size)
    request_page = PageRequest(page=page, size=page_size, sort=orders or DEFAULT_SORT)
    cards = await service.list_page(owner=principal.subject, page=request_page)
    return [CashCardOut.model_validate(c) for c in cards]


async def update_cash_card(
    card_id: int,
    body: CashCardAmount,
    principal: Principal = Depends(get_principal),
    service: CashCardService = Depends(cash_card_service),
) -> Response:
    updated = await service.update_amount(
        owner=principal.subject, card_id=card_id, amount=body.amount
    )
    if not updated:
        return _not_found()
    return Response(status_code=HTTP_204_NO_CONTENT)


async def delete_cash_card(
    card_id: int,
    principal: Principal = Depends(get_principal),
    service: CashCardService = Depends(cash_card_service),
) -> Response:
    deleted = await service.delete(owner=principal.subject, card_id=card_id)
    if not deleted:
        return _not_found()
    return Response(status_code=HTTP_204_NO_CONTENT)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    response_model: Any = None

    @property
    def name(self) -> str:
        return self.endpoint.__name__


CASH_CARD_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec("GET", "/{card_id}", get_cash_card, HTTP_200_OK, CashCardOut),
    RouteSpec("POST", "", create_cash_card, HTTP_201_CREATED),
    RouteSpec("GET", "", list_cash_cards, HTTP_200_OK, list[CashCardOut]),
    RouteSpec("PUT", "/{card_id}", update_cash_card, HTTP_204_NO_CONTENT),
    RouteSpec("DELETE", "/{card_id}", delete_cash_card, HTTP_204_NO_CONTENT),
)

ALL_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
UNMATCHED_PATHS = ("", "/{rest:path}")


async def unmatched_cash_card_path() -> Response:
    return _not_found()


def build_router(routes: tuple[RouteSpec, ...] = CASH_CARD_ROUTES) -> APIRouter:
    router = APIRouter(
        prefix=PREFIX,
        tags=["cashcards"],
        dependencies=[Depends(require_roles(CARD_OWNER))],
    )
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            name=route.name,
            status_code=route.status_code,
            response_model=route.response_model,
        )
    # Registered last: anything else under the prefix still passes the role gate first.
    for path in UNMATCHED_PATHS:
        router.add_api_route(
            path,
            unmatched_cash_card_path,
            methods=list(ALL_METHODS),
            name="unmatched_cash_card_path",
            response_model=None,
            include_in_schema=False,
        )
    return router


# --- Module Notes -----------------------------------------------------------
# Without a `sort` parameter, listing orders by amount ascending; id ascending is
# always the final tie-break (see `db.repositories.cash_cards`).
