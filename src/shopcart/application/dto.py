"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (snapshots, the discount slot) to the outside.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    name: str
    price: str  # formatted, e.g. "$1,000.00"
    available: bool
    available_count: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line."""

    product_name: str
    quantity: int
    unit_price: str
    buy_one_get_one_eligible: bool


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its priced total."""

    lines: list[CartLineDTO]
    discount: str | None  # e.g. "5% off"; None when no discount is set
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


class DiscountChoice(Enum):
    """Input: which discount the user picked from the menu."""

    PERCENTAGE = 1
    BUY_ONE_GET_ONE_FREE = 2
