"""Abstract repository for Inventory aggregate.

Implementations must serialize concurrent read-modify-write cycles on the
same product code (row lock, version check, single writer...). The domain
itself takes no locks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sms.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_product_code(self, product_code: str) -> Inventory | None:
        """Return the inventory record for a product, or None."""

    @abstractmethod
    def list_all(self) -> list[Inventory]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, inventory: Inventory) -> None:
        """Persist a new inventory record."""

    @abstractmethod
    def update(self, inventory: Inventory) -> None:
        """Persist changes to an existing inventory record."""

    def find_below_reorder(self) -> list[Inventory]:
        """Return every inventory record whose total is below the reorder level."""
        return [inv for inv in self.list_all() if inv.is_below_reorder()]
