"""Application service: Show BOGO-eligible products (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.application.list_products import to_product_dto
from shopcart.application.session import ShoppingSession


class ShowEligibleProductsHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self) -> list[ProductDTO]:
        return [
            to_product_dto(p)
            for p in self._session.cart.eligible_products_for_buy_one_get_one()
        ]
