"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The only concrete implementation keeps the fixed demo
catalog in memory for the lifetime of one session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Add a product or replace the one with the same name."""
