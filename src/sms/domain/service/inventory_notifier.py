"""Change notification for inventory mutations.

Listeners are called synchronously, in the order they were attached. For
every mutation all listeners hear ``on_inventory_changed`` first; only then,
if the new total is below the reorder level, all of them hear
``on_low_stock``. A listener that raises stops the fan-out and the error
reaches the caller unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sms.domain.model.inventory import REORDER_THRESHOLD, Inventory

logger = logging.getLogger(__name__)


class InventoryListener(ABC):

    @abstractmethod
    def on_inventory_changed(self, inventory: Inventory) -> None:
        """Called after every successful inventory mutation."""

    @abstractmethod
    def on_low_stock(self, inventory: Inventory) -> None:
        """Called after a mutation that leaves the total below the reorder level."""


class InventoryNotifier:

    def __init__(self) -> None:
        self._listeners: list[InventoryListener] = []

    @property
    def listeners(self) -> list[InventoryListener]:
        return list(self._listeners)

    def attach(self, listener: InventoryListener | None) -> None:
        if listener is not None and listener not in self._listeners:
            self._listeners.append(listener)

    def detach(self, listener: InventoryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_inventory_changed(self, inventory: Inventory) -> None:
        for listener in list(self._listeners):
            listener.on_inventory_changed(inventory)

        if inventory.is_below_reorder():
            for listener in list(self._listeners):
                listener.on_low_stock(inventory)


class StockAlertListener(InventoryListener):
    """Writes inventory changes and low-stock alerts to the log."""

    def on_inventory_changed(self, inventory: Inventory) -> None:
        logger.info(
            "Inventory updated for %s: shelf=%d store=%d online=%d total=%d",
            inventory.product_code,
            inventory.shelf_qty,
            inventory.store_qty,
            inventory.online_qty,
            inventory.total,
        )

    def on_low_stock(self, inventory: Inventory) -> None:
        logger.warning(
            "Low stock for %s: total %d is below reorder level %d",
            inventory.product_code,
            inventory.total,
            REORDER_THRESHOLD,
        )
