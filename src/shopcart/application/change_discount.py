"""Application service: Change Discount Strategy use case.

Replaces the active discount unless Buy One Get One Free is locked in.
Picking BOGO with nothing eligible falls back to *setting* the
percentage discount, which only succeeds while the slot is still empty.
"""

from __future__ import annotations

from shopcart.application.apply_discount import NO_ELIGIBLE_MESSAGE
from shopcart.application.dto import DiscountChoice
from shopcart.application.session import ShoppingSession
from shopcart.domain.model.discount import DiscountStrategy
from shopcart.domain.model.outcome import CartEvent, CartOutcome


class ChangeDiscountHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self, choice: DiscountChoice) -> list[CartOutcome]:
        """Return every outcome produced, in order (the fallback adds one)."""
        cart = self._session.cart
        percentage = DiscountStrategy.percentage_off(self._session.percentage_discount)

        if choice is DiscountChoice.PERCENTAGE:
            return [cart.change_discount_strategy(percentage)]

        if cart.has_buy_one_get_one_items():
            return [cart.change_discount_strategy(DiscountStrategy.buy_one_get_one_free())]

        return [
            CartOutcome(CartEvent.NO_ELIGIBLE_PRODUCTS, NO_ELIGIBLE_MESSAGE),
            cart.set_discount_strategy(percentage),
        ]
