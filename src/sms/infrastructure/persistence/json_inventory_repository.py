"""JSON-file-backed implementation of InventoryRepository.

Single-process only: two CLI invocations racing on the same file can lose
updates.
"""

from __future__ import annotations

import json
from pathlib import Path

from sms.domain.exceptions import EntityNotFoundError, ValidationError
from sms.domain.model.inventory import Inventory
from sms.domain.repository.inventory_repository import InventoryRepository


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    def get_by_product_code(self, product_code: str) -> Inventory | None:
        for raw in self._load_raw():
            if raw["product_code"] == product_code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Inventory]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, inventory: Inventory) -> None:
        records = self._load_raw()
        if any(raw["product_code"] == inventory.product_code for raw in records):
            raise ValidationError(
                f"Inventory for '{inventory.product_code}' already exists"
            )
        records.append(self._to_raw(inventory))
        self._persist_raw(records)

    def update(self, inventory: Inventory) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["product_code"] == inventory.product_code:
                records[i] = self._to_raw(inventory)
                self._persist_raw(records)
                return
        raise EntityNotFoundError(
            f"No inventory record for product '{inventory.product_code}'"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(inventory: Inventory) -> dict:
        return {
            "product_code": inventory.product_code,
            "shelf_qty": inventory.shelf_qty,
            "store_qty": inventory.store_qty,
            "online_qty": inventory.online_qty,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Inventory:
        return Inventory(
            product_code=raw["product_code"],
            shelf_qty=raw.get("shelf_qty", 0),
            store_qty=raw.get("store_qty", 0),
            online_qty=raw.get("online_qty", 0),
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
