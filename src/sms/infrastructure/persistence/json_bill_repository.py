"""JSON-file-backed implementation of BillRepository.

Derived totals are written alongside the items so the file can be read
without the domain model; on load they are recomputed from the items.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from sms.domain.exceptions import ValidationError
from sms.domain.model.bill import Bill, BillItem, Channel
from sms.domain.model.value_objects import Money, Quantity
from sms.domain.repository.bill_repository import BillRepository


class JsonBillRepository(BillRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BillRepository interface ---------------------------------------------

    def next_serial_number(self) -> int:
        bills = self._load_raw()
        if not bills:
            return 1
        return max(b["serial"] for b in bills) + 1

    def get_by_serial(self, serial_number: int) -> Bill | None:
        for raw in self._load_raw():
            if raw["serial"] == serial_number:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Bill]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_by_date(self, day: date, channel: Channel | None = None) -> list[Bill]:
        return [
            bill for bill in self.list_all()
            if bill.date.date() == day
            and (channel is None or bill.channel is channel)
        ]

    def save(self, bill: Bill) -> None:
        bills = self._load_raw()
        if any(raw["serial"] == bill.serial_number for raw in bills):
            raise ValidationError(f"Bill #{bill.serial_number} already exists")
        bills.append(self._to_raw(bill))
        self._persist_raw(bills)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(bill: Bill) -> dict:
        return {
            "serial": bill.serial_number,
            "date": bill.date.isoformat(),
            "channel": bill.channel.value,
            "customer_id": bill.customer_id,
            "currency": bill.cash_tendered.currency,
            "items": [
                {
                    "product_code": item.product_code,
                    "product_name": item.product_name,
                    "unit": item.unit,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "discount_percentage": str(item.discount_percentage),
                }
                for item in bill.items
            ],
            "subtotal": str(bill.subtotal.amount),
            "discount": str(bill.discount.amount),
            "total": str(bill.total.amount),
            "cash_tendered": str(bill.cash_tendered.amount),
            "change": str(bill.change.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Bill:
        currency = raw.get("currency", "LKR")
        items = tuple(
            BillItem(
                product_code=i["product_code"],
                product_name=i["product_name"],
                unit=i["unit"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
                discount_percentage=Decimal(i["discount_percentage"]),
            )
            for i in raw["items"]
        )
        return Bill(
            serial_number=raw["serial"],
            items=items,
            cash_tendered=Money(Decimal(raw["cash_tendered"]), currency),
            channel=Channel(raw["channel"]),
            customer_id=raw.get("customer_id"),
            date=datetime.fromisoformat(raw["date"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, bills: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(bills, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
