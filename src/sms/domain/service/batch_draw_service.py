"""Domain service: Batch Draw.

Drains a quantity from a product's batch pool, one strategy decision at a
time. Used by both sales and transfers so the two follow the same rules.

Each iteration re-reads the batch list from the repository, asks the
strategy for a batch, takes as much as it can from it and persists the
batch at once. There is no overarching transaction: when the pool runs dry
part-way, the batches already drawn stay drawn and the caller's error
reports how many units could not be accounted for.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from sms.domain.exceptions import InconsistencyError, InvalidQuantity
from sms.domain.repository.stock_batch_repository import StockBatchRepository
from sms.domain.service.batch_selection import BatchSelectionStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchDraw:
    """How many units one draw took from one batch."""

    batch_id: str
    quantity: int
    expiry_date: date


class BatchDrawService:

    def __init__(
        self,
        batch_repo: StockBatchRepository,
        strategy: BatchSelectionStrategy,
    ) -> None:
        self._batch_repo = batch_repo
        self._strategy = strategy

    def draw(
        self,
        product_code: str,
        quantity: int,
        on_exhausted: Callable[[str, int], InconsistencyError],
    ) -> list[BatchDraw]:
        """Remove *quantity* units from the product's batches.

        ``on_exhausted(product_code, remaining)`` builds the error raised
        when the strategy finds no drawable batch while units remain.
        """
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        draws: list[BatchDraw] = []
        remaining = quantity

        while remaining > 0:
            batches = self._batch_repo.list_by_product(product_code)
            selected = self._strategy.select_batch(batches)
            if selected is None:
                logger.error(
                    "Batch pool for %s exhausted with %d of %d units outstanding",
                    product_code, remaining, quantity,
                )
                raise on_exhausted(product_code, remaining)

            take = min(remaining, selected.quantity)
            selected.reduce_quantity(take)
            self._batch_repo.update(selected)
            remaining -= take

            logger.debug(
                "Drew %d of %s from batch %s (expires %s)",
                take, product_code, selected.batch_id, selected.expiry_date,
            )
            draws.append(BatchDraw(selected.batch_id, take, selected.expiry_date))

        return draws
