"""JSON-file-backed implementation of StockBatchRepository.

Batch IDs are ``B<n>`` where ``n`` is one more than the highest number
already on file, so IDs survive restarts.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from sms.domain.exceptions import EntityNotFoundError
from sms.domain.model.stock_batch import StockBatch
from sms.domain.repository.stock_batch_repository import StockBatchRepository

_ID_PREFIX = "B"


class JsonStockBatchRepository(StockBatchRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- StockBatchRepository interface ---------------------------------------

    def next_batch_id(self) -> str:
        numbers = [
            int(raw["batch_id"][len(_ID_PREFIX):])
            for raw in self._load_raw()
            if raw["batch_id"].startswith(_ID_PREFIX)
            and raw["batch_id"][len(_ID_PREFIX):].isdigit()
        ]
        return f"{_ID_PREFIX}{max(numbers, default=0) + 1}"

    def get_by_id(self, batch_id: str) -> StockBatch | None:
        for raw in self._load_raw():
            if raw["batch_id"] == batch_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[StockBatch]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_by_product(self, product_code: str) -> list[StockBatch]:
        # File order is receipt order
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["product_code"] == product_code
        ]

    def save(self, batch: StockBatch) -> None:
        records = self._load_raw()
        records.append(self._to_raw(batch))
        self._persist_raw(records)

    def update(self, batch: StockBatch) -> None:
        records = self._load_raw()
        for raw in records:
            if raw["batch_id"] == batch.batch_id:
                raw["quantity"] = batch.quantity
                self._persist_raw(records)
                return
        raise EntityNotFoundError(f"Stock batch not found: {batch.batch_id}")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(batch: StockBatch) -> dict:
        return {
            "batch_id": batch.batch_id,
            "product_code": batch.product_code,
            "purchase_date": batch.purchase_date.isoformat(),
            "quantity": batch.quantity,
            "expiry_date": batch.expiry_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> StockBatch:
        return StockBatch(
            batch_id=raw["batch_id"],
            product_code=raw["product_code"],
            purchase_date=date.fromisoformat(raw["purchase_date"]),
            quantity=raw["quantity"],
            expiry_date=date.fromisoformat(raw["expiry_date"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
