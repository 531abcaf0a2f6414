"""Discount strategies.

A closed set of variants tagged by ``DiscountKind``; ``apply_discount``
is the single place that dispatches on the tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DiscountKind(Enum):
    PERCENTAGE = "PERCENTAGE"
    BUY_ONE_GET_ONE_FREE = "BUY_ONE_GET_ONE_FREE"


@dataclass(frozen=True)
class DiscountStrategy:
    """A stateless pricing rule selected for the whole cart.

    ``percentage`` only matters for PERCENTAGE.  It is not range checked:
    values outside 0-100 are the caller's mistake and simply produce an
    inflated or negative line total.
    """

    kind: DiscountKind
    percentage: Decimal = Decimal("0")

    @staticmethod
    def percentage_off(percentage: str | int | Decimal) -> DiscountStrategy:
        return DiscountStrategy(DiscountKind.PERCENTAGE, Decimal(str(percentage)))

    @staticmethod
    def buy_one_get_one_free() -> DiscountStrategy:
        return DiscountStrategy(DiscountKind.BUY_ONE_GET_ONE_FREE)

    @property
    def is_buy_one_get_one_free(self) -> bool:
        return self.kind is DiscountKind.BUY_ONE_GET_ONE_FREE

    def describe(self) -> str:
        if self.kind is DiscountKind.PERCENTAGE:
            return f"{self.percentage.normalize():f}% off"
        return "Buy One Get One Free"


def apply_discount(strategy: DiscountStrategy, unit_price: Decimal, quantity: int) -> Decimal:
    """Price *quantity* units of one product under *strategy*.

    The BOGO branch charges for ``ceil(quantity / 2)`` units.  It knows
    nothing about eligibility; the cart decides which lines qualify.
    """
    if strategy.kind is DiscountKind.PERCENTAGE:
        return unit_price * quantity * (1 - strategy.percentage / 100)
    if strategy.kind is DiscountKind.BUY_ONE_GET_ONE_FREE:
        pairs = quantity // 2
        remainder = quantity % 2
        return unit_price * (pairs + remainder)
    raise ValueError(f"Unhandled discount kind: {strategy.kind}")
