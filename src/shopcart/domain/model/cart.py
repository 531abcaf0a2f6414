"""Cart aggregate: line items, the discount slot and BOGO eligibility.

Every mutating operation returns a ``CartOutcome``; none of them raise
for an expected business condition.  A rejected request leaves the
cart exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.model.discount import DiscountKind, DiscountStrategy, apply_discount
from shopcart.domain.model.eligibility import BuyOneGetOneEligibility
from shopcart.domain.model.outcome import CartEvent, CartOutcome
from shopcart.domain.model.product import Product

logger = logging.getLogger(__name__)


@dataclass
class CartItem:
    """One cart line: a product snapshot plus the quantity taken.

    ``product.available_count`` on the snapshot is how many units were
    left in stock when the line was created or last updated, not the
    live catalog count.
    """

    product: Product
    quantity: int

    @property
    def name(self) -> str:
        return self.product.name


class Cart:
    """The shopping cart for one session.

    Discount slot: starts unset; ``set_discount_strategy`` fills it once,
    ``change_discount_strategy`` replaces it unless BOGO is active.  It
    can never be cleared.
    """

    def __init__(self) -> None:
        self._items: dict[str, CartItem] = {}
        self._discount_strategy: DiscountStrategy | None = None
        self._buy_one_get_one = BuyOneGetOneEligibility()

    # --- Line items -----------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> CartOutcome:
        """Reserve *quantity* units of *product* into the cart.

        Only checks that the product has some stock.  The reservation is
        recorded on a snapshot, so the catalog entry keeps its count.
        Adding a product already in the cart bumps the existing line and
        keeps that line's original snapshot.
        """
        if not product.is_available():
            return self._report(
                CartEvent.INSUFFICIENT_STOCK,
                f"Not enough quantity available for {product.name}. "
                f"Available quantity: {product.available_count}",
                available=product.available_count,
            )

        snapshot = product.clone()
        snapshot.decrease_available_count(quantity)

        existing = self._items.get(product.name)
        if existing is None:
            self._items[product.name] = CartItem(snapshot, quantity)
        else:
            existing.quantity += quantity

        return self._report(
            CartEvent.SUCCESS,
            f"Added {quantity} {product.name} to the cart.",
        )

    def update_quantity(self, product_name: str, new_quantity: int) -> CartOutcome:
        """Set the quantity of an existing line.

        The ceiling is what the snapshot would hold if the whole line were
        put back.  The snapshot moves by the difference between the new
        and previous quantity.  A quantity of 0 keeps the line.
        """
        item = self._items.get(product_name)
        if item is None:
            return self._report(
                CartEvent.ITEM_NOT_FOUND,
                "The item is not present in the cart or available items.",
            )

        snapshot = item.product
        previous_quantity = item.quantity
        available_count = snapshot.available_count + previous_quantity
        if new_quantity > available_count:
            return self._report(
                CartEvent.INSUFFICIENT_STOCK,
                f"Not enough quantity available for {snapshot.name}. "
                f"Available quantity: {available_count}",
                available=available_count,
            )

        item.quantity = new_quantity
        snapshot.decrease_available_count(new_quantity - previous_quantity)
        return self._report(
            CartEvent.SUCCESS,
            f"Updated {snapshot.name} quantity to {new_quantity}.",
        )

    def remove_item(self, product_name: str) -> CartOutcome:
        """Drop a line.  The reserved units are discarded, not restocked."""
        if self._items.pop(product_name, None) is None:
            return self._report(
                CartEvent.ITEM_NOT_FOUND,
                f"'{product_name}' is not in the cart.",
            )
        return self._report(CartEvent.SUCCESS, f"Removed {product_name} from the cart.")

    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def get_item(self, product_name: str) -> CartItem | None:
        return self._items.get(product_name)

    # --- Discount slot --------------------------------------------------------

    @property
    def discount_strategy(self) -> DiscountStrategy | None:
        return self._discount_strategy

    def check_discount_slot(self) -> CartOutcome | None:
        """Return the "already applied" outcome if a discount is set, else None."""
        if self._discount_strategy is None:
            return None
        return self._report(
            CartEvent.DISCOUNT_ALREADY_APPLIED,
            "Discount is already applied. "
            "To change the discount, use the change discount option.",
        )

    def set_discount_strategy(self, strategy: DiscountStrategy) -> CartOutcome:
        taken = self.check_discount_slot()
        if taken is not None:
            return taken
        self._discount_strategy = strategy
        return self._report(CartEvent.DISCOUNT_APPLIED, "Discount applied successfully.")

    def change_discount_strategy(self, strategy: DiscountStrategy) -> CartOutcome:
        current = self._discount_strategy
        if current is not None and current.is_buy_one_get_one_free:
            return self._report(
                CartEvent.DISCOUNT_LOCKED,
                "Cannot change discount type. "
                "Buy One Get One Free discount is already applied.",
            )
        self._discount_strategy = strategy
        return self._report(CartEvent.DISCOUNT_CHANGED, "Discount type changed successfully.")

    # --- Buy One Get One eligibility ------------------------------------------

    def add_eligible_product_for_buy_one_get_one(self, product: Product) -> None:
        self._buy_one_get_one.add_eligible_product(product)
        logger.info("%s registered for Buy One Get One Free", product.name)

    def has_buy_one_get_one_items(self) -> bool:
        return self._buy_one_get_one.has_eligible_products()

    def eligible_products_for_buy_one_get_one(self) -> list[Product]:
        return self._buy_one_get_one.eligible_products()

    # --- Pricing --------------------------------------------------------------

    def calculate_total_bill(self) -> Decimal:
        """Price every line under the active discount.

        An eligible line under BOGO is charged half of ``price * quantity``
        (plain halving, so an odd quantity pays for half a unit).  This is
        deliberately not ``apply_discount``'s pair-based formula.
        """
        total = Decimal("0")
        strategy = self._discount_strategy

        for item in self._items.values():
            price = item.product.price.amount
            quantity = item.quantity
            if (
                strategy is not None
                and strategy.kind is DiscountKind.BUY_ONE_GET_ONE_FREE
                and self._buy_one_get_one.is_product_eligible(item.product)
            ):
                total += price * quantity / 2
            elif strategy is not None and strategy.kind is DiscountKind.PERCENTAGE:
                total += apply_discount(strategy, price, quantity)
            else:
                total += price * quantity

        return total

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _report(event: CartEvent, message: str, available: int | None = None) -> CartOutcome:
        logger.info("cart %s: %s", event.value, message)
        return CartOutcome(event=event, message=message, available=available)
