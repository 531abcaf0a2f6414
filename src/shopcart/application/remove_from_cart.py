"""Application service: Remove from Cart use case."""

from __future__ import annotations

from shopcart.application.session import ShoppingSession
from shopcart.application.update_cart_item import canonical_name
from shopcart.domain.model.outcome import CartOutcome


class RemoveFromCartHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self, product_name: str) -> CartOutcome:
        return self._session.cart.remove_item(canonical_name(self._session, product_name))
