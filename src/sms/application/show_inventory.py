"""Application services: inventory queries (read-only).

- ``ShowInventoryHandler``  every inventory row with its product name
- ``ReorderLevelsHandler``  rows whose total fell below the reorder level
- ``ReshelveHandler``       rows whose shelf is running thin while the
                            store still holds stock
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sms.domain.model.inventory import REORDER_THRESHOLD, Inventory
from sms.domain.repository.inventory_repository import InventoryRepository
from sms.domain.repository.product_repository import ProductRepository

# Reorder up to the threshold plus this buffer
REORDER_BUFFER = 20

# Reshelve when the shelf holds less than this percentage of shelf + store
SHELF_SHARE_PERCENT = 30


@dataclass(frozen=True)
class InventoryLineDTO:
    product_code: str
    product_name: str
    shelf: int
    store: int
    online: int
    total: int
    below_reorder: bool


@dataclass(frozen=True)
class ReorderLineDTO:
    product_code: str
    product_name: str
    total: int
    reorder_quantity: int


@dataclass(frozen=True)
class ReshelveLineDTO:
    product_code: str
    product_name: str
    shelf: int
    store: int
    recommended: int


class _InventoryQuery:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_repo = product_repo

    def _name_of(self, inv: Inventory) -> str:
        product = self._product_repo.get_by_code(inv.product_code)
        return product.name if product is not None else "Unknown"


class ShowInventoryHandler(_InventoryQuery):

    def handle(self) -> list[InventoryLineDTO]:
        items = self._inventory_repo.list_all()
        return [
            InventoryLineDTO(
                product_code=inv.product_code,
                product_name=self._name_of(inv),
                shelf=inv.shelf_qty,
                store=inv.store_qty,
                online=inv.online_qty,
                total=inv.total,
                below_reorder=inv.is_below_reorder(),
            )
            for inv in sorted(items, key=lambda i: i.product_code)
        ]


class ReorderLevelsHandler(_InventoryQuery):

    def handle(self) -> list[ReorderLineDTO]:
        low = self._inventory_repo.find_below_reorder()
        return [
            ReorderLineDTO(
                product_code=inv.product_code,
                product_name=self._name_of(inv),
                total=inv.total,
                reorder_quantity=REORDER_THRESHOLD - inv.total + REORDER_BUFFER,
            )
            for inv in sorted(low, key=lambda i: i.product_code)
        ]


class ReshelveHandler(_InventoryQuery):

    def handle(self) -> list[ReshelveLineDTO]:
        lines: list[ReshelveLineDTO] = []
        for inv in self._inventory_repo.list_all():
            if inv.store_qty == 0:
                continue

            threshold = math.ceil((inv.shelf_qty + inv.store_qty) * SHELF_SHARE_PERCENT / 100)
            if inv.shelf_qty >= threshold:
                continue

            product = self._product_repo.get_by_code(inv.product_code)
            if product is None:
                continue

            lines.append(
                ReshelveLineDTO(
                    product_code=inv.product_code,
                    product_name=product.name,
                    shelf=inv.shelf_qty,
                    store=inv.store_qty,
                    recommended=min(threshold - inv.shelf_qty, inv.store_qty),
                )
            )
        return sorted(lines, key=lambda line: line.product_code)
