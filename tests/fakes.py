"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.

Inventory and batch fakes hand out copies, like a real store would, so a
test only sees a change once the code under test has persisted it.
"""

from __future__ import annotations

import copy
from datetime import date

from sms.domain.exceptions import EntityNotFoundError
from sms.domain.model.bill import Bill, Channel
from sms.domain.model.inventory import Inventory
from sms.domain.model.product import Product
from sms.domain.model.stock_batch import StockBatch
from sms.domain.repository.bill_repository import BillRepository
from sms.domain.repository.inventory_repository import InventoryRepository
from sms.domain.repository.product_repository import ProductRepository
from sms.domain.repository.stock_batch_repository import StockBatchRepository
from sms.domain.service.inventory_notifier import InventoryListener


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.code] = p

    def get_by_code(self, code: str) -> Product | None:
        return self._store.get(code)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.code] = product


class FakeInventoryRepository(InventoryRepository):

    def __init__(self, items: list[Inventory] | None = None) -> None:
        self._store: dict[str, Inventory] = {}
        for item in items or []:
            self._store[item.product_code] = copy.deepcopy(item)

    def get_by_product_code(self, product_code: str) -> Inventory | None:
        return copy.deepcopy(self._store.get(product_code))

    def list_all(self) -> list[Inventory]:
        return [copy.deepcopy(inv) for inv in self._store.values()]

    def save(self, inventory: Inventory) -> None:
        self._store[inventory.product_code] = copy.deepcopy(inventory)

    def update(self, inventory: Inventory) -> None:
        if inventory.product_code not in self._store:
            raise EntityNotFoundError(inventory.product_code)
        self._store[inventory.product_code] = copy.deepcopy(inventory)


class FakeStockBatchRepository(StockBatchRepository):

    def __init__(self, batches: list[StockBatch] | None = None) -> None:
        self._store: dict[str, StockBatch] = {}
        self._counter = 0
        self.updates: list[tuple[str, int]] = []
        for b in batches or []:
            self._store[b.batch_id] = copy.deepcopy(b)

    def next_batch_id(self) -> str:
        self._counter += 1
        return f"B{self._counter}"

    def get_by_id(self, batch_id: str) -> StockBatch | None:
        return copy.deepcopy(self._store.get(batch_id))

    def list_all(self) -> list[StockBatch]:
        return [copy.deepcopy(b) for b in self._store.values()]

    def list_by_product(self, product_code: str) -> list[StockBatch]:
        return [
            copy.deepcopy(b) for b in self._store.values()
            if b.product_code == product_code
        ]

    def save(self, batch: StockBatch) -> None:
        self._store[batch.batch_id] = copy.deepcopy(batch)

    def update(self, batch: StockBatch) -> None:
        if batch.batch_id not in self._store:
            raise EntityNotFoundError(batch.batch_id)
        self._store[batch.batch_id].quantity = batch.quantity
        self.updates.append((batch.batch_id, batch.quantity))

    def quantity_of(self, batch_id: str) -> int:
        return self._store[batch_id].quantity

    def total_for(self, product_code: str) -> int:
        return sum(b.quantity for b in self.list_by_product(product_code))


class FakeBillRepository(BillRepository):

    def __init__(self) -> None:
        self._store: dict[int, Bill] = {}
        self._next_serial = 1

    def next_serial_number(self) -> int:
        serial = self._next_serial
        self._next_serial += 1
        return serial

    def get_by_serial(self, serial_number: int) -> Bill | None:
        return self._store.get(serial_number)

    def list_all(self) -> list[Bill]:
        return [self._store[k] for k in sorted(self._store)]

    def find_by_date(self, day: date, channel: Channel | None = None) -> list[Bill]:
        return [
            b for b in self.list_all()
            if b.date.date() == day and (channel is None or b.channel is channel)
        ]

    def save(self, bill: Bill) -> None:
        self._store[bill.serial_number] = bill


class RecordingListener(InventoryListener):
    """Remembers every event it hears, in order."""

    def __init__(self, log: list[tuple[str, str, str]] | None = None, name: str = "listener") -> None:
        self.events: list[tuple[str, str, str]] = log if log is not None else []
        self.name = name

    def on_inventory_changed(self, inventory: Inventory) -> None:
        self.events.append((self.name, "changed", inventory.product_code))

    def on_low_stock(self, inventory: Inventory) -> None:
        self.events.append((self.name, "low_stock", inventory.product_code))
