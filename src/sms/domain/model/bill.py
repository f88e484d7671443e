"""Bill aggregate — the immutable record of a completed sale.

A Bill is built once, from product snapshots taken at sale time, and never
changes afterwards. Later price or name changes on the Product do not
reach existing bills.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from sms.domain.exceptions import InsufficientPayment, ValidationError
from sms.domain.model.value_objects import Money, Quantity


class Channel(Enum):
    """Where a sale happens. Decides which inventory bucket it draws from."""

    COUNTER = "COUNTER"  # shelf
    ONLINE = "ONLINE"  # online allocation


@dataclass(frozen=True)
class BillItem:
    """Captures the price snapshot of a product at sale time."""

    product_code: str
    product_name: str
    unit: str
    quantity: Quantity
    unit_price: Money
    discount_percentage: Decimal = Decimal("0")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def discount_amount(self) -> Money:
        return self.line_total.percentage(self.discount_percentage)

    @property
    def net_total(self) -> Money:
        return self.line_total - self.discount_amount


@dataclass(frozen=True)
class Bill:
    """Aggregate root for completed sales.

    Use the ``Bill.create()`` factory for new bills. It enforces all
    business rules. The constructor stays simple so the repository can
    reconstitute persisted bills without re-validating.
    """

    serial_number: int
    items: tuple[BillItem, ...]
    cash_tendered: Money
    channel: Channel = Channel.COUNTER
    customer_id: str | None = None
    date: datetime = field(default_factory=datetime.now)

    @staticmethod
    def create(
        serial_number: int,
        items: list[BillItem],
        cash_tendered: Money,
        channel: Channel = Channel.COUNTER,
        customer_id: str | None = None,
        date: datetime | None = None,
    ) -> Bill:
        """Create a new bill, enforcing all invariants."""
        if not items:
            raise ValidationError("Bill must have at least one item")

        bill = Bill(
            serial_number=serial_number,
            items=tuple(items),
            cash_tendered=cash_tendered,
            channel=channel,
            customer_id=customer_id,
            date=date or datetime.now(),
        )

        if bill.cash_tendered < bill.total:
            raise InsufficientPayment(
                f"Cash tendered {bill.cash_tendered} is less than total {bill.total}"
            )

        return bill

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.cash_tendered.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def discount(self) -> Money:
        result = Money.zero(self.cash_tendered.currency)
        for item in self.items:
            result = result + item.discount_amount
        return result

    @property
    def total(self) -> Money:
        return self.subtotal - self.discount

    @property
    def change(self) -> Money:
        return self.cash_tendered - self.total
