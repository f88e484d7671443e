"""Integration tests for the TransferStock use case."""

from datetime import date, timedelta

import pytest

from sms.application.transfer_stock import TransferStockHandler, TransferType
from sms.domain.clock import FixedClock
from sms.domain.exceptions import (
    InsufficientStoreQuantity,
    InventoryNotFound,
    InvalidQuantity,
    NoAvailableBatch,
)
from sms.domain.model.inventory import Inventory
from sms.domain.model.stock_batch import StockBatch
from sms.domain.service.batch_selection import ExpiryPriorityStrategy, FifoStrategy
from sms.domain.service.inventory_notifier import InventoryNotifier
from tests.fakes import FakeInventoryRepository, FakeStockBatchRepository, RecordingListener

TODAY = date(2026, 3, 1)


def day(n: int) -> date:
    return TODAY + timedelta(days=n)


def _setup(inventory: Inventory, batches: list[StockBatch], strategy_cls=ExpiryPriorityStrategy):
    inventory_repo = FakeInventoryRepository([inventory])
    batch_repo = FakeStockBatchRepository(batches)
    listener = RecordingListener()
    notifier = InventoryNotifier()
    notifier.attach(listener)
    handler = TransferStockHandler(
        inventory_repo, batch_repo, strategy_cls(FixedClock(TODAY)), notifier
    )
    return handler, inventory_repo, batch_repo, listener


def _batches() -> list[StockBatch]:
    return [
        StockBatch("B1", "P001", day(-20), 30, day(90)),
        StockBatch("B2", "P001", day(-3), 30, day(15)),
    ]


class TestTransferHappyPath:

    def test_store_to_shelf(self):
        handler, inv_repo, batch_repo, _ = _setup(Inventory("P001", shelf_qty=5, store_qty=60), _batches())

        result = handler.handle("P001", 20, TransferType.STORE_TO_SHELF)

        inv = inv_repo.get_by_product_code("P001")
        assert (inv.shelf_qty, inv.store_qty, inv.online_qty) == (25, 40, 0)
        assert (result.shelf_qty, result.store_qty) == (25, 40)
        assert batch_repo.quantity_of("B2") == 10
        assert batch_repo.quantity_of("B1") == 30

    def test_store_to_online_also_draws_batches(self):
        handler, inv_repo, batch_repo, _ = _setup(Inventory("P001", store_qty=60), _batches())

        result = handler.handle("P001", 45, TransferType.STORE_TO_ONLINE)

        inv = inv_repo.get_by_product_code("P001")
        assert (inv.shelf_qty, inv.store_qty, inv.online_qty) == (0, 15, 45)
        assert [(d.batch_id, d.quantity) for d in result.draws] == [("B2", 30), ("B1", 15)]
        assert result.transfer_type == "STORE_TO_ONLINE"

    def test_injected_strategy_is_used(self):
        handler, _, batch_repo, _ = _setup(
            Inventory("P001", store_qty=60), _batches(), strategy_cls=FifoStrategy
        )
        handler.handle("P001", 10, TransferType.STORE_TO_SHELF)
        assert batch_repo.quantity_of("B1") == 20
        assert batch_repo.quantity_of("B2") == 30

    def test_notifies_once_with_low_stock(self):
        handler, _, _, listener = _setup(Inventory("P001", store_qty=40), _batches())
        handler.handle("P001", 5, TransferType.STORE_TO_SHELF)
        assert listener.events == [
            ("listener", "changed", "P001"),
            ("listener", "low_stock", "P001"),
        ]


class TestTransferValidation:

    def test_missing_inventory_rejected(self):
        handler, _, _, listener = _setup(Inventory("P001", store_qty=10), _batches())
        with pytest.raises(InventoryNotFound):
            handler.handle("P404", 1, TransferType.STORE_TO_SHELF)
        assert listener.events == []

    def test_more_than_store_rejected_without_side_effects(self):
        handler, inv_repo, batch_repo, listener = _setup(Inventory("P001", store_qty=10), _batches())

        with pytest.raises(InsufficientStoreQuantity) as exc_info:
            handler.handle("P001", 11, TransferType.STORE_TO_SHELF)

        assert (exc_info.value.available, exc_info.value.requested) == (10, 11)
        assert inv_repo.get_by_product_code("P001").store_qty == 10
        assert batch_repo.updates == []
        assert listener.events == []

    @pytest.mark.parametrize("qty", [0, -3])
    def test_non_positive_quantity_rejected(self, qty):
        handler, _, batch_repo, _ = _setup(Inventory("P001", store_qty=10), _batches())
        with pytest.raises(InvalidQuantity):
            handler.handle("P001", qty, TransferType.STORE_TO_SHELF)
        assert batch_repo.updates == []


class TestTransferBatchShortfall:

    def test_no_available_batch_keeps_partial_draws(self):
        handler, inv_repo, batch_repo, listener = _setup(
            Inventory("P001", store_qty=100),
            [StockBatch("B1", "P001", day(-20), 30, day(90))],
        )

        with pytest.raises(NoAvailableBatch) as exc_info:
            handler.handle("P001", 50, TransferType.STORE_TO_SHELF)

        assert exc_info.value.remaining == 20
        assert batch_repo.quantity_of("B1") == 0
        inv = inv_repo.get_by_product_code("P001")
        assert (inv.shelf_qty, inv.store_qty) == (0, 100)
        assert listener.events == []
