"""Application service: Apply Discount use case.

Fills the cart's discount slot for the first time.  Buy One Get One
Free is only offered when at least one product is registered for it.
"""

from __future__ import annotations

from shopcart.application.dto import DiscountChoice
from shopcart.application.session import ShoppingSession
from shopcart.domain.model.discount import DiscountStrategy
from shopcart.domain.model.outcome import CartEvent, CartOutcome

NO_ELIGIBLE_MESSAGE = "No products eligible for Buy One Get One Free Discount."


class ApplyDiscountHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def check_slot(self) -> CartOutcome | None:
        """Report "already applied" before the user is asked to pick a discount."""
        return self._session.cart.check_discount_slot()

    def handle(self, choice: DiscountChoice) -> CartOutcome:
        cart = self._session.cart

        taken = cart.check_discount_slot()
        if taken is not None:
            return taken

        if choice is DiscountChoice.PERCENTAGE:
            return cart.set_discount_strategy(
                DiscountStrategy.percentage_off(self._session.percentage_discount)
            )

        if not cart.has_buy_one_get_one_items():
            return CartOutcome(CartEvent.NO_ELIGIBLE_PRODUCTS, NO_ELIGIBLE_MESSAGE)
        return cart.set_discount_strategy(DiscountStrategy.buy_one_get_one_free())
