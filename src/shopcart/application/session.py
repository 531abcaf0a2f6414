"""The shopping session: everything one run of the program works on.

Built once by the composition root and handed to every use-case
handler, so no handler reaches for module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.product_repository import ProductRepository


@dataclass
class ShoppingSession:

    products: ProductRepository
    cart: Cart = field(default_factory=Cart)
    percentage_discount: Decimal = Decimal("5")
