"""Application service: Display Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.application.session import ShoppingSession
from shopcart.domain.model.value_objects import format_amount


class ShowCartHandler:

    def __init__(self, session: ShoppingSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        cart = self._session.cart
        eligible = {p.name for p in cart.eligible_products_for_buy_one_get_one()}
        strategy = cart.discount_strategy

        return CartDTO(
            lines=[
                CartLineDTO(
                    product_name=item.name,
                    quantity=item.quantity,
                    unit_price=str(item.product.price),
                    buy_one_get_one_eligible=item.name in eligible,
                )
                for item in cart.items()
            ],
            discount=strategy.describe() if strategy is not None else None,
            total=format_amount(cart.calculate_total_bill()),
        )
