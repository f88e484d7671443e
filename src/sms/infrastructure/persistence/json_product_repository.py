"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from sms.domain.model.product import DEFAULT_UNIT, Product
from sms.domain.model.value_objects import Money
from sms.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_code(self, code: str) -> Product | None:
        return self._load().get(code)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.code] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["code"]: Product(
                code=item["code"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "LKR")),
                unit=item.get("unit", DEFAULT_UNIT),
                discount_percentage=Decimal(item.get("discount_percentage", "0")),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "code": p.code,
                "name": p.name,
                "unit": p.unit,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "discount_percentage": str(p.discount_percentage),
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
