"""
cashcard_service.db.paging

Paging and sorting request types for listing queries.

Responsibilities:
- Parse `field[,direction]` sort directives into typed `SortOrder`s.
- Carry page index, page size and ordering into repositories.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Direction(enum.StrEnum):
    asc = "asc"
    desc = "desc"


class InvalidSortError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: str
    direction: Direction = Direction.asc


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int
    size: int
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


def parse_sort(raw: Iterable[str], *, allowed: Iterable[str]) -> tuple[SortOrder, ...]:
    """
    Parse sort query values such as ``amount,desc`` or ``id``.

    A value may carry several comma-separated fields followed by an optional
    direction that applies to all of them (``owner,amount,desc``).
    """

    allowed_fields = frozenset(allowed)
    orders: list[SortOrder] = []
    for value in raw:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            continue

        direction = Direction.asc
        if parts[-1].lower() in Direction.__members__ and len(parts) > 1:
            direction = Direction(parts.pop().lower())

        for name in parts:
            if name not in allowed_fields:
                raise InvalidSortError(f"unsupported sort field: {name!r}")
            orders.append(SortOrder(field=name, direction=direction))
    return tuple(orders)
