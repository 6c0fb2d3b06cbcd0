from __future__ import annotations

import pytest

from cashcard_service.db.paging import (
    Direction,
    InvalidSortError,
    PageRequest,
    SortOrder,
    parse_sort,
)

ALLOWED = ("id", "amount", "owner")


def test_field_without_direction_defaults_to_ascending() -> None:
    assert parse_sort(["amount"], allowed=ALLOWED) == (SortOrder("amount", Direction.asc),)


def test_direction_applies_to_all_listed_fields() -> None:
    assert parse_sort(["owner,amount,desc"], allowed=ALLOWED) == (
        SortOrder("owner", Direction.desc),
        SortOrder("amount", Direction.desc),
    )


def test_multiple_values_keep_their_order() -> None:
    orders = parse_sort(["amount,desc", "id"], allowed=ALLOWED)
    assert [(o.field, o.direction) for o in orders] == [
        ("amount", Direction.desc),
        ("id", Direction.asc),
    ]


def test_blank_values_are_skipped() -> None:
    assert parse_sort(["", " , "], allowed=ALLOWED) == ()


def test_whitespace_around_parts_is_ignored() -> None:
    assert parse_sort([" amount , Desc "], allowed=ALLOWED) == (
        SortOrder("amount", Direction.desc),
    )


@pytest.mark.parametrize("raw", ["balance", "amount,sideways", "asc"])
def test_unknown_fields_are_rejected(raw: str) -> None:
    with pytest.raises(InvalidSortError):
        parse_sort([raw], allowed=ALLOWED)


def test_page_request_offset() -> None:
    assert PageRequest(page=0, size=20).offset == 0
    assert PageRequest(page=3, size=7).offset == 21


@pytest.mark.parametrize(("page", "size"), [(-1, 20), (0, 0)])
def test_page_request_bounds(page: int, size: int) -> None:
    with pytest.raises(ValueError):
        PageRequest(page=page, size=size)
