"""Unit tests for the Buy One Get One eligibility registry."""

from shopcart.domain.model.eligibility import BuyOneGetOneEligibility
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


def _product(name: str) -> Product:
    return Product(name=name, price=Money.of("10"), available_count=1)


class TestBuyOneGetOneEligibility:

    def test_empty_registry(self):
        reg = BuyOneGetOneEligibility()
        assert not reg.has_eligible_products()
        assert not reg.is_product_eligible(_product("Laptop"))

    def test_registered_product_is_eligible(self):
        reg = BuyOneGetOneEligibility()
        reg.add_eligible_product(_product("Laptop"))
        assert reg.has_eligible_products()
        assert reg.is_product_eligible(_product("Laptop"))
        assert not reg.is_product_eligible(_product("Headphones"))

    def test_match_is_by_name_not_identity(self):
        reg = BuyOneGetOneEligibility()
        laptop = _product("Laptop")
        reg.add_eligible_product(laptop)
        assert reg.is_product_eligible(laptop.clone())

    def test_match_is_case_sensitive(self):
        reg = BuyOneGetOneEligibility()
        reg.add_eligible_product(_product("Laptop"))
        assert not reg.is_product_eligible(_product("laptop"))

    def test_duplicates_are_harmless(self):
        reg = BuyOneGetOneEligibility()
        reg.add_eligible_product(_product("Laptop"))
        reg.add_eligible_product(_product("Laptop"))
        assert reg.is_product_eligible(_product("Laptop"))
        assert [p.name for p in reg.eligible_products()] == ["Laptop", "Laptop"]
