"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.application.session import ShoppingSession
from shopcart.domain.model.product import Product


class ListProductsHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._session.products.list_all()]


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        name=product.name,
        price=str(product.price),
        available=product.is_available(),
        available_count=product.available_count,
    )
