"""Dict-backed implementation of ProductRepository.

State lives only as long as the session that owns the repository.
"""

from __future__ import annotations

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.add(p)

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(_key(name))

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[_key(product.name)] = product

    # --- Seeding --------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Register a new product; names must be unique ignoring case."""
        if self.get_by_name(product.name) is not None:
            raise ValidationError(f"Product '{product.name}' already exists")
        self.save(product)


def _key(name: str) -> str:
    return name.strip().lower()
