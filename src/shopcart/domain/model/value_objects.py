"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Unit price of a catalog product.

    Decimal keeps ``1000 * 2 * 0.95`` exact.  Bill totals are plain
    Decimals rather than Money because an out-of-range percentage is
    allowed to drive them below zero.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return format_amount(self.amount)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def format_amount(amount: Decimal) -> str:
    """Render a Decimal as ``$1,900.00`` (or ``-$5.00``)."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
