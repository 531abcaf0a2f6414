"""Application service: Add to Cart use case.

Resolves the typed product name against the catalog (ignoring case)
and hands the live catalog product to the cart, which reserves the
quantity on its own snapshot.
"""

from __future__ import annotations

from shopcart.application.session import ShoppingSession
from shopcart.domain.model.outcome import CartEvent, CartOutcome


class AddToCartHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self, product_name: str, quantity: int) -> CartOutcome:
        product = self._session.products.get_by_name(product_name)
        if product is None:
            return CartOutcome(CartEvent.PRODUCT_NOT_FOUND, "Invalid product name.")

        return self._session.cart.add_item(product, quantity)
