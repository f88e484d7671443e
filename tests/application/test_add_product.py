"""Integration tests for the AddProduct use case."""

from decimal import Decimal

import pytest

from sms.application.add_product import AddProductHandler
from sms.domain.exceptions import ValidationError
from sms.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_adds_product(self):
        repo = FakeProductRepository()
        product = AddProductHandler(repo).handle("P001", "Rice", "100.00", unit="kg", discount_percentage="5")

        assert repo.get_by_code("P001") is product
        assert product.price == Money.of("100.00")
        assert product.discount_percentage == Decimal("5")

    def test_duplicate_code_rejected(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        handler.handle("P001", "Rice", "100.00")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("P001", "Other", "1.00")

    def test_bad_discount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid discount"):
            AddProductHandler(FakeProductRepository()).handle("P001", "Rice", "1", discount_percentage="lots")

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(FakeProductRepository()).handle("P001", "Rice", "free")

    @pytest.mark.parametrize("raw", ["NaN", "sNaN", "Infinity"])
    def test_non_finite_discount_rejected(self, raw):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="Invalid discount"):
            AddProductHandler(repo).handle("P001", "Rice", "1", discount_percentage=raw)
        assert repo.get_by_code("P001") is None

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            AddProductHandler(FakeProductRepository()).handle("P001", "Rice", "NaN")
