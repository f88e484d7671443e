"""Batch selection strategies.

A strategy looks at a snapshot of one product's batches and names the batch
the next units should come from. Strategies are pure: they never mutate the
batches they are given and return the same answer for the same snapshot.

Ties on purchase or expiry date go to the batch that comes first in the
given sequence. Repositories list batches in receipt order, so the
earliest-received batch wins a tie.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from sms.domain.clock import Clock, SystemClock
from sms.domain.model.stock_batch import StockBatch


class BatchSelectionStrategy(ABC):

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    @abstractmethod
    def select_batch(self, batches: Sequence[StockBatch]) -> StockBatch | None:
        """Return the batch to draw from next, or None if nothing is drawable."""

    def _drawable(self, batches: Sequence[StockBatch]) -> list[StockBatch]:
        """Batches that still hold stock and have not expired."""
        today = self._clock.today()
        return [b for b in batches if b.quantity > 0 and not b.is_expired(today)]


class FifoStrategy(BatchSelectionStrategy):
    """Always draw from the oldest purchase."""

    def select_batch(self, batches: Sequence[StockBatch]) -> StockBatch | None:
        candidates = self._drawable(batches)
        if not candidates:
            return None
        return min(candidates, key=lambda b: b.purchase_date)


class ExpiryPriorityStrategy(BatchSelectionStrategy):
    """Oldest purchase first, unless another batch expires sooner.

    If the batch with the nearest expiry date is not the oldest batch and
    expires strictly before it, that batch is chosen instead.
    """

    def select_batch(self, batches: Sequence[StockBatch]) -> StockBatch | None:
        candidates = self._drawable(batches)
        if not candidates:
            return None

        oldest = min(candidates, key=lambda b: b.purchase_date)
        closest_expiry = min(candidates, key=lambda b: b.expiry_date)

        if closest_expiry is not oldest and closest_expiry.expiry_date < oldest.expiry_date:
            return closest_expiry
        return oldest
