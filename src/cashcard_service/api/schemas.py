"""
cashcard_service.api.schemas

Request/response models for the cash card endpoints.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from cashcard_service.db.models import AMOUNT_PRECISION, AMOUNT_SCALE

# Out-of-range amounts are a 422 before anything reaches the store.
Amount = Annotated[
    Decimal,
    Field(max_digits=AMOUNT_PRECISION, decimal_places=AMOUNT_SCALE, allow_inf_nan=False),
]

# Within AMOUNT_PRECISION digits the emitted float prints back as the same decimal.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CashCardAmount(BaseModel):
    """
    Body for POST and PUT. Only `amount` is read; `id` and `owner` in the
    payload are ignored and come from the server and the credentials instead.
    """

    model_config = ConfigDict(extra="ignore")

    amount: Amount


class CashCardOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: JsonDecimal
    owner: str
