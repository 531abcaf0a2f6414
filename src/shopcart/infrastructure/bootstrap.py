"""Composition root: builds the session one run of the program works on.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import logging

from shopcart.application.session import ShoppingSession
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)


def demo_catalog(settings: Settings) -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            Product(name="Laptop", price=Money.of("1000"), available_count=settings.laptop_stock),
            Product(name="Headphones", price=Money.of("50"), available_count=settings.headphones_stock),
        ]
    )


def create_session(settings: Settings | None = None) -> ShoppingSession:
    settings = settings or Settings()
    products = demo_catalog(settings)
    cart = Cart()

    for name in settings.bogo_products:
        product = products.get_by_name(name)
        if product is None:
            raise EntityNotFoundError(
                f"Cannot offer Buy One Get One Free on unknown product '{name}'"
            )
        cart.add_eligible_product_for_buy_one_get_one(product)

    logger.debug(
        "session ready: %d products, %d BOGO-eligible",
        len(products.list_all()),
        len(settings.bogo_products),
    )
    return ShoppingSession(
        products=products,
        cart=cart,
        percentage_discount=settings.percentage_discount,
    )
