"""A catalog entry with a unit price and a stock counter.

A cart line never holds the catalog instance itself: it holds a
``clone()`` whose counter moves independently of the catalog entry.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``available == (available_count > 0)`` after construction
    and after every call below.  The fields stay public for reading;
    change the counter only through these methods or the flag goes stale.
    """

    name: str
    price: Money
    available_count: int = 0
    available: bool = field(init=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.available_count < 0:
            raise ValidationError(
                f"Available count for {self.name} cannot be negative, "
                f"got {self.available_count}"
            )
        self.available = self.available_count > 0

    def is_available(self) -> bool:
        return self.available

    def set_available_count(self, count: int) -> None:
        self.available_count = count
        self.available = self.available_count > 0

    def decrease_available_count(self, quantity: int) -> None:
        """Take *quantity* units off the counter.

        Silently does nothing when *quantity* exceeds the remaining
        count.  A negative *quantity* passes the check and puts units
        back, which is how a cart line returns stock when shrinking.
        """
        if self.available_count >= quantity:
            self.available_count -= quantity
            self.available = self.available_count > 0

    def clone(self) -> Product:
        """Return an independent copy (Money is immutable, so shallow is enough)."""
        return copy.copy(self)
