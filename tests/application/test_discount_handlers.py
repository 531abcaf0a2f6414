"""Integration tests for the apply / change discount use cases."""

from decimal import Decimal

from shopcart.application.apply_discount import ApplyDiscountHandler
from shopcart.application.change_discount import ChangeDiscountHandler
from shopcart.application.dto import DiscountChoice
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.session import ShoppingSession
from shopcart.application.show_eligible_products import ShowEligibleProductsHandler
from shopcart.domain.model.discount import DiscountStrategy
from shopcart.domain.model.outcome import CartEvent
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

PERCENT_5 = DiscountStrategy.percentage_off(5)
BOGO = DiscountStrategy.buy_one_get_one_free()


def _setup(with_bogo: bool = True) -> ShoppingSession:
    products = InMemoryProductRepository(
        [
            Product(name="Laptop", price=Money.of("1000"), available_count=10),
            Product(name="Headphones", price=Money.of("50"), available_count=10),
        ]
    )
    session = ShoppingSession(products=products, percentage_discount=Decimal("5"))
    if with_bogo:
        session.cart.add_eligible_product_for_buy_one_get_one(products.get_by_name("Laptop"))
    return session


class TestApplyDiscount:

    def test_apply_percentage(self):
        session = _setup()
        outcome = ApplyDiscountHandler(session).handle(DiscountChoice.PERCENTAGE)

        assert outcome.event == CartEvent.DISCOUNT_APPLIED
        assert session.cart.discount_strategy == PERCENT_5

    def test_percentage_uses_session_setting(self):
        session = _setup()
        session.percentage_discount = Decimal("20")
        ApplyDiscountHandler(session).handle(DiscountChoice.PERCENTAGE)
        assert session.cart.discount_strategy == DiscountStrategy.percentage_off(20)

    def test_apply_bogo(self):
        session = _setup()
        outcome = ApplyDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert outcome.ok
        assert session.cart.discount_strategy == BOGO

    def test_apply_bogo_without_eligible_products(self):
        session = _setup(with_bogo=False)
        outcome = ApplyDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert outcome.event == CartEvent.NO_ELIGIBLE_PRODUCTS
        assert session.cart.discount_strategy is None

    def test_apply_twice_reports_already_applied(self):
        session = _setup()
        handler = ApplyDiscountHandler(session)
        handler.handle(DiscountChoice.PERCENTAGE)
        outcome = handler.handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert outcome.event == CartEvent.DISCOUNT_ALREADY_APPLIED
        assert session.cart.discount_strategy == PERCENT_5

    def test_already_applied_wins_over_no_eligible(self):
        session = _setup(with_bogo=False)
        handler = ApplyDiscountHandler(session)
        handler.handle(DiscountChoice.PERCENTAGE)
        outcome = handler.handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)
        assert outcome.event == CartEvent.DISCOUNT_ALREADY_APPLIED


    def test_check_slot_before_choosing(self):
        session = _setup()
        handler = ApplyDiscountHandler(session)
        assert handler.check_slot() is None

        handler.handle(DiscountChoice.PERCENTAGE)
        assert handler.check_slot().event == CartEvent.DISCOUNT_ALREADY_APPLIED


class TestChangeDiscount:

    def test_change_to_bogo(self):
        session = _setup()
        ApplyDiscountHandler(session).handle(DiscountChoice.PERCENTAGE)
        outcomes = ChangeDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert [o.event for o in outcomes] == [CartEvent.DISCOUNT_CHANGED]
        assert session.cart.discount_strategy == BOGO

    def test_change_blocked_while_bogo_active(self):
        session = _setup()
        ApplyDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)
        outcomes = ChangeDiscountHandler(session).handle(DiscountChoice.PERCENTAGE)

        assert [o.event for o in outcomes] == [CartEvent.DISCOUNT_LOCKED]
        assert session.cart.discount_strategy == BOGO

    def test_bogo_without_eligible_falls_back_to_percentage(self):
        session = _setup(with_bogo=False)
        outcomes = ChangeDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert [o.event for o in outcomes] == [
            CartEvent.NO_ELIGIBLE_PRODUCTS,
            CartEvent.DISCOUNT_APPLIED,
        ]
        assert session.cart.discount_strategy == PERCENT_5

    def test_fallback_does_not_replace_existing_discount(self):
        session = _setup(with_bogo=False)
        session.cart.set_discount_strategy(DiscountStrategy.percentage_off(10))
        outcomes = ChangeDiscountHandler(session).handle(DiscountChoice.BUY_ONE_GET_ONE_FREE)

        assert outcomes[-1].event == CartEvent.DISCOUNT_ALREADY_APPLIED
        assert session.cart.discount_strategy == DiscountStrategy.percentage_off(10)


class TestShowEligibleProducts:

    def test_lists_registered_products(self):
        dtos = ShowEligibleProductsHandler(_setup()).handle()
        assert [d.name for d in dtos] == ["Laptop"]

    def test_empty_when_none_registered(self):
        assert ShowEligibleProductsHandler(_setup(with_bogo=False)).handle() == []

    def test_eligible_rows_match_catalog_rows(self):
        session = _setup()
        eligible = ShowEligibleProductsHandler(session).handle()
        catalog = ListProductsHandler(session).handle()
        assert eligible == [catalog[0]]
