"""Registry of products that qualify for Buy One Get One Free."""

from __future__ import annotations

from shopcart.domain.model.product import Product


class BuyOneGetOneEligibility:

    def __init__(self) -> None:
        self._products: list[Product] = []

    def add_eligible_product(self, product: Product) -> None:
        # Duplicates are harmless: membership is a name lookup.
        self._products.append(product)

    def is_product_eligible(self, product: Product) -> bool:
        """Case-sensitive exact match on the product name."""
        return any(p.name == product.name for p in self._products)

    def eligible_products(self) -> list[Product]:
        return list(self._products)

    def has_eligible_products(self) -> bool:
        return bool(self._products)
