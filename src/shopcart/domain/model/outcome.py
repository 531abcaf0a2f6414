"""Results of cart operations.

Cart operations never raise for business conditions.  They return a
``CartOutcome`` telling the caller what happened and what to show.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CartEvent(Enum):
    SUCCESS = "SUCCESS"
    DISCOUNT_APPLIED = "DISCOUNT_APPLIED"
    DISCOUNT_CHANGED = "DISCOUNT_CHANGED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    DISCOUNT_ALREADY_APPLIED = "DISCOUNT_ALREADY_APPLIED"
    DISCOUNT_LOCKED = "DISCOUNT_LOCKED"
    NO_ELIGIBLE_PRODUCTS = "NO_ELIGIBLE_PRODUCTS"


_SUCCESS_EVENTS = frozenset(
    {CartEvent.SUCCESS, CartEvent.DISCOUNT_APPLIED, CartEvent.DISCOUNT_CHANGED}
)


@dataclass(frozen=True)
class CartOutcome:
    """What a cart operation did.

    ``available`` is filled in for INSUFFICIENT_STOCK so the caller can
    tell the user how many units could have been taken.
    """

    event: CartEvent
    message: str
    available: int | None = None

    @property
    def ok(self) -> bool:
        return self.event in _SUCCESS_EVENTS

    def __str__(self) -> str:
        return self.message
