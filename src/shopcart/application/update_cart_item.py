"""Application service: Update Quantity in Cart use case."""

from __future__ import annotations

from shopcart.application.session import ShoppingSession
from shopcart.domain.model.outcome import CartOutcome


class UpdateCartItemHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self, product_name: str, new_quantity: int) -> CartOutcome:
        """Change a line's quantity.

        Cart lines are keyed by the catalog spelling, so "laptop" is
        mapped to "Laptop" first.  Names outside the catalog go through
        unchanged and the cart reports them as missing.
        """
        name = canonical_name(self._session, product_name)
        return self._session.cart.update_quantity(name, new_quantity)


def canonical_name(session: ShoppingSession, product_name: str) -> str:
    product = session.products.get_by_name(product_name)
    return product.name if product is not None else product_name
