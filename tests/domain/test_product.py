"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from sms.domain.exceptions import ValidationError
from sms.domain.model.product import Product
from sms.domain.model.value_objects import Money


class TestProductCreate:

    def test_defaults(self):
        p = Product.create("P001", "Rice", Money.of("100.00"))
        assert p.unit == "pcs"
        assert p.discount_percentage == Decimal("0")

    def test_strips_whitespace(self):
        p = Product.create(" P001 ", " Rice ", Money.of("1"), unit=" kg ")
        assert (p.code, p.name, p.unit) == ("P001", "Rice", "kg")

    @pytest.mark.parametrize("discount", ["-1", "100.01", "NaN", "sNaN", "Infinity"])
    def test_discount_out_of_range_rejected(self, discount):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Product.create("P001", "Rice", Money.of("1"), discount_percentage=discount)

    def test_unparseable_discount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid discount"):
            Product.create("P001", "Rice", Money.of("1"), discount_percentage="half")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name"):
            Product.create("P001", "", Money.of("1"))

    def test_discounted_price(self):
        p = Product.create("P001", "Rice", Money.of("100.00"), discount_percentage="10")
        assert p.discounted_price == Money.of("90.00")

    def test_free_product_allowed(self):
        p = Product.create("P001", "Sample", Money.of("0"))
        assert p.discounted_price == Money.of("0")
