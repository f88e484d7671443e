"""Unit tests for the Bill aggregate."""

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from sms.domain.exceptions import InsufficientPayment, ValidationError
from sms.domain.model.bill import Bill, BillItem, Channel
from sms.domain.model.value_objects import Money, Quantity


def _item(code: str = "P001", qty: int = 1, price: str = "100.00", discount: str = "0") -> BillItem:
    return BillItem(
        product_code=code,
        product_name=f"Product {code}",
        unit="pcs",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
        discount_percentage=Decimal(discount),
    )


class TestBillItem:

    def test_line_total_and_discount(self):
        item = _item(qty=3, price="20.00", discount="25")
        assert item.line_total == Money.of("60.00")
        assert item.discount_amount == Money.of("15.00")
        assert item.net_total == Money.of("45.00")


class TestBillCreation:

    def test_totals_for_discounted_sale(self):
        bill = Bill.create(1, [_item(qty=10, price="100.00", discount="10")], Money.of("900.00"))
        assert bill.subtotal == Money.of("1000.00")
        assert bill.discount == Money.of("100.00")
        assert bill.total == Money.of("900.00")
        assert bill.change == Money.of("0.00")

    def test_totals_sum_over_items(self):
        bill = Bill.create(
            7,
            [_item("P001", 2, "10.00"), _item("P002", 1, "5.50", discount="50")],
            Money.of("50.00"),
            channel=Channel.ONLINE,
            customer_id="C-1",
        )
        assert bill.subtotal == Money.of("25.50")
        assert bill.discount == Money.of("2.75")
        assert bill.total == Money.of("22.75")
        assert bill.change == Money.of("27.25")
        assert bill.channel is Channel.ONLINE
        assert bill.customer_id == "C-1"

    def test_empty_bill_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Bill.create(1, [], Money.of("10.00"))

    def test_cash_short_of_total_rejected(self):
        with pytest.raises(InsufficientPayment):
            Bill.create(1, [_item(price="100.00")], Money.of("99.99"))

    def test_uses_given_date(self):
        when = datetime(2026, 5, 1, 9, 30)
        bill = Bill.create(1, [_item()], Money.of("100"), date=when)
        assert bill.date == when

    def test_bill_is_immutable(self):
        bill = Bill.create(1, [_item()], Money.of("100"))
        with pytest.raises(FrozenInstanceError):
            bill.serial_number = 2  # type: ignore[misc]
        assert isinstance(bill.items, tuple)
