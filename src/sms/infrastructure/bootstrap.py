"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration:
    SMS_DATA_DIR        directory holding the JSON files. Defaults to
                        ``data/`` at the repository root.
    SMS_BATCH_STRATEGY  how batches are picked: ``expiry`` (default) or
                        ``fifo``.
"""

from __future__ import annotations

import os
from pathlib import Path

from sms.domain.clock import SystemClock
from sms.domain.exceptions import ValidationError
from sms.domain.service.batch_selection import (
    BatchSelectionStrategy,
    ExpiryPriorityStrategy,
    FifoStrategy,
)
from sms.domain.service.inventory_notifier import InventoryNotifier, StockAlertListener
from sms.infrastructure.persistence.json_bill_repository import JsonBillRepository
from sms.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from sms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from sms.infrastructure.persistence.json_stock_batch_repository import (
    JsonStockBatchRepository,
)

DATA_DIR_ENV = "SMS_DATA_DIR"
STRATEGY_ENV = "SMS_BATCH_STRATEGY"

DEFAULT_STRATEGY = "expiry"
_STRATEGIES: dict[str, type[BatchSelectionStrategy]] = {
    "expiry": ExpiryPriorityStrategy,
    "fifo": FifoStrategy,
}

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(data_dir() / "inventory.json")


def stock_batch_repository() -> JsonStockBatchRepository:
    return JsonStockBatchRepository(data_dir() / "stock_batches.json")


def bill_repository() -> JsonBillRepository:
    return JsonBillRepository(data_dir() / "bills.json")


def clock() -> SystemClock:
    return SystemClock()


def strategy_name() -> str:
    name = os.environ.get(STRATEGY_ENV, DEFAULT_STRATEGY).strip().lower()
    if name not in _STRATEGIES:
        raise ValidationError(
            f"Unknown batch strategy '{name}' (expected one of: "
            f"{', '.join(sorted(_STRATEGIES))})"
        )
    return name


def selection_strategy() -> BatchSelectionStrategy:
    return _STRATEGIES[strategy_name()](clock())


def inventory_notifier() -> InventoryNotifier:
    notifier = InventoryNotifier()
    notifier.attach(StockAlertListener())
    return notifier
