"""Unit tests for the discount strategies."""

from decimal import Decimal

import pytest

from shopcart.domain.model.discount import DiscountKind, DiscountStrategy, apply_discount


class TestPercentageDiscount:

    def test_five_percent_off(self):
        strategy = DiscountStrategy.percentage_off(5)
        assert apply_discount(strategy, Decimal("1000"), 2) == Decimal("1900")

    def test_zero_percent_is_full_price(self):
        strategy = DiscountStrategy.percentage_off(0)
        assert apply_discount(strategy, Decimal("50"), 3) == Decimal("150")

    def test_out_of_range_percentage_not_validated(self):
        strategy = DiscountStrategy.percentage_off(150)
        assert apply_discount(strategy, Decimal("10"), 1) == Decimal("-5")

    def test_describe(self):
        assert DiscountStrategy.percentage_off(5).describe() == "5% off"
        assert DiscountStrategy.percentage_off("12.5").describe() == "12.5% off"


class TestBuyOneGetOneFreeDiscount:

    @pytest.mark.parametrize(
        "quantity, expected",
        [(0, "0"), (1, "50"), (2, "50"), (4, "100"), (5, "150")],
    )
    def test_charges_for_pairs_plus_remainder(self, quantity, expected):
        strategy = DiscountStrategy.buy_one_get_one_free()
        assert apply_discount(strategy, Decimal("50"), quantity) == Decimal(expected)

    def test_kind_flags(self):
        strategy = DiscountStrategy.buy_one_get_one_free()
        assert strategy.kind is DiscountKind.BUY_ONE_GET_ONE_FREE
        assert strategy.is_buy_one_get_one_free
        assert not DiscountStrategy.percentage_off(5).is_buy_one_get_one_free

    def test_describe(self):
        assert DiscountStrategy.buy_one_get_one_free().describe() == "Buy One Get One Free"


class TestStrategyEquality:

    def test_strategies_compare_by_value(self):
        assert DiscountStrategy.percentage_off(5) == DiscountStrategy.percentage_off("5")
        assert DiscountStrategy.buy_one_get_one_free() == DiscountStrategy.buy_one_get_one_free()
