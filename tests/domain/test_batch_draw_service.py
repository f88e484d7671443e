"""Unit tests for the BatchDrawService domain service."""

from datetime import date, timedelta

import pytest

from sms.domain.clock import FixedClock
from sms.domain.exceptions import BatchExhaustion, InvalidQuantity, NoAvailableBatch
from sms.domain.model.stock_batch import StockBatch
from sms.domain.service.batch_draw_service import BatchDrawService
from sms.domain.service.batch_selection import ExpiryPriorityStrategy
from tests.fakes import FakeStockBatchRepository

DAY0 = date(2026, 1, 1)


def day(n: int) -> date:
    return DAY0 + timedelta(days=n)


def _setup(*specs: tuple[str, int, int, int]):
    """Build a service over (batch_id, purchased, expires, qty) batches of P001."""
    repo = FakeStockBatchRepository(
        [StockBatch(bid, "P001", day(p), qty, day(e)) for bid, p, e, qty in specs]
    )
    svc = BatchDrawService(repo, ExpiryPriorityStrategy(FixedClock(day(10))))
    return svc, repo


class TestDraw:

    def test_single_batch_partial_draw(self):
        svc, repo = _setup(("A", 1, 60, 10))
        draws = svc.draw("P001", 4, BatchExhaustion)
        assert [(d.batch_id, d.quantity) for d in draws] == [("A", 4)]
        assert repo.quantity_of("A") == 6

    def test_spills_over_in_selection_order(self):
        # B expires first, then A (oldest), then C
        svc, repo = _setup(("A", 1, 60, 5), ("B", 5, 20, 3), ("C", 6, 90, 10))
        draws = svc.draw("P001", 12, BatchExhaustion)
        assert [(d.batch_id, d.quantity) for d in draws] == [("B", 3), ("A", 5), ("C", 4)]
        assert repo.quantity_of("C") == 6

    def test_every_draw_is_persisted(self):
        svc, repo = _setup(("A", 1, 60, 2), ("B", 2, 70, 2))
        svc.draw("P001", 3, NoAvailableBatch)
        assert repo.updates == [("A", 0), ("B", 1)]

    def test_total_drawn_equals_requested(self):
        svc, repo = _setup(("A", 1, 60, 7), ("B", 2, 30, 7), ("C", 3, 90, 7))
        before = repo.total_for("P001")
        draws = svc.draw("P001", 15, BatchExhaustion)
        assert sum(d.quantity for d in draws) == 15
        assert before - repo.total_for("P001") == 15

    def test_exhaustion_raises_callers_error(self):
        svc, repo = _setup(("A", 1, 60, 3))
        with pytest.raises(NoAvailableBatch) as exc_info:
            svc.draw("P001", 5, NoAvailableBatch)
        assert exc_info.value.remaining == 2
        assert exc_info.value.product_code == "P001"
        # Earlier draws in the same call stay applied
        assert repo.quantity_of("A") == 0

    def test_expired_batches_are_not_drawn(self):
        svc, repo = _setup(("OLD", 1, 9, 50), ("A", 2, 60, 5))
        with pytest.raises(BatchExhaustion):
            svc.draw("P001", 6, BatchExhaustion)
        assert repo.quantity_of("OLD") == 50

    def test_non_positive_quantity_rejected(self):
        svc, _ = _setup(("A", 1, 60, 3))
        with pytest.raises(InvalidQuantity):
            svc.draw("P001", 0, BatchExhaustion)
