"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from sms.domain.model.bill import Bill


@dataclass(frozen=True)
class SaleLine:
    """Input: one cart line (product code + quantity)."""

    product_code: str
    quantity: int


@dataclass(frozen=True)
class BillItemDTO:
    """Output: a single bill line as displayed to the user."""

    product_code: str
    product_name: str
    unit: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rs. 100.00"
    discount_percentage: str
    line_total: str


@dataclass(frozen=True)
class BillDTO:
    """Output: a complete bill as displayed to the user."""

    serial_number: int
    date: str
    channel: str
    customer_id: str | None
    items: list[BillItemDTO]
    subtotal: str
    discount: str
    total: str
    cash_tendered: str
    change: str


@dataclass(frozen=True)
class BatchDrawDTO:
    batch_id: str
    quantity: int
    expiry_date: str


@dataclass(frozen=True)
class TransferResultDTO:
    """Output: what a transfer moved and where the buckets ended up."""

    product_code: str
    quantity: int
    transfer_type: str
    draws: list[BatchDrawDTO]
    shelf_qty: int
    store_qty: int
    online_qty: int


def bill_to_dto(bill: Bill) -> BillDTO:
    return BillDTO(
        serial_number=bill.serial_number,
        date=bill.date.strftime("%Y-%m-%d %H:%M"),
        channel=bill.channel.value,
        customer_id=bill.customer_id,
        items=[
            BillItemDTO(
                product_code=item.product_code,
                product_name=item.product_name,
                unit=item.unit,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                discount_percentage=f"{item.discount_percentage}%",
                line_total=str(item.line_total),
            )
            for item in bill.items
        ],
        subtotal=str(bill.subtotal),
        discount=str(bill.discount),
        total=str(bill.total),
        cash_tendered=str(bill.cash_tendered),
        change=str(bill.change),
    )
