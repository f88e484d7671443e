"""Application service: daily sales report (query).

Totals every bill issued on one day, optionally for a single channel.
Revenue is what the customer paid: line totals after discount.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sms.domain.model.bill import Channel
from sms.domain.model.value_objects import Money
from sms.domain.repository.bill_repository import BillRepository


@dataclass(frozen=True)
class SalesLineDTO:
    product_code: str
    product_name: str
    quantity: int
    revenue: str


@dataclass(frozen=True)
class DailySalesDTO:
    """Output: one day's sales, aggregated per product."""

    date: str
    channel: str  # "ALL" when unfiltered
    lines: list[SalesLineDTO]
    total_revenue: str
    transactions: int


class DailySalesHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, day: date, channel: Channel | None = None) -> DailySalesDTO:
        bills = self._bill_repo.find_by_date(day, channel)

        names: dict[str, str] = {}
        quantities: dict[str, int] = {}
        revenues: dict[str, Money] = {}
        total = Money.zero()

        for bill in bills:
            total = total + bill.total
            for item in bill.items:
                code = item.product_code
                names.setdefault(code, item.product_name)
                quantities[code] = quantities.get(code, 0) + item.quantity.value
                revenues[code] = revenues.get(code, Money.zero()) + item.net_total

        return DailySalesDTO(
            date=day.isoformat(),
            channel=channel.value if channel is not None else "ALL",
            lines=[
                SalesLineDTO(
                    product_code=code,
                    product_name=names[code],
                    quantity=quantities[code],
                    revenue=str(revenues[code]),
                )
                for code in sorted(quantities)
            ],
            total_revenue=str(total),
            transactions=len(bills),
        )
