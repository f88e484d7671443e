"""Application service: Receive Batch use case.

Stock arrives at the back store. The receipt becomes a new batch dated
today and the product's store bucket grows by the same amount. The first
receipt of a product creates its inventory record.
"""

from __future__ import annotations

import logging
from datetime import date

from sms.domain.clock import Clock, SystemClock
from sms.domain.exceptions import InvalidQuantity, ProductNotFound
from sms.domain.model.inventory import Inventory
from sms.domain.model.stock_batch import StockBatch
from sms.domain.repository.inventory_repository import InventoryRepository
from sms.domain.repository.product_repository import ProductRepository
from sms.domain.repository.stock_batch_repository import StockBatchRepository
from sms.domain.service.inventory_notifier import InventoryNotifier

logger = logging.getLogger(__name__)


class ReceiveBatchHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        batch_repo: StockBatchRepository,
        inventory_repo: InventoryRepository,
        notifier: InventoryNotifier,
        clock: Clock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._batch_repo = batch_repo
        self._inventory_repo = inventory_repo
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def handle(self, product_code: str, quantity: int, expiry_date: date) -> StockBatch:
        """Record a stock receipt and return the new batch."""
        product = self._product_repo.get_by_code(product_code)
        if product is None:
            raise ProductNotFound(product_code)
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        batch = StockBatch.create(
            batch_id=self._batch_repo.next_batch_id(),
            product_code=product.code,
            purchase_date=self._clock.today(),
            quantity=quantity,
            expiry_date=expiry_date,
        )
        self._batch_repo.save(batch)

        inv = self._inventory_repo.get_by_product_code(product.code)
        if inv is None:
            inv = Inventory(product_code=product.code)
            inv.add_to_store(quantity)
            self._inventory_repo.save(inv)
        else:
            inv.add_to_store(quantity)
            self._inventory_repo.update(inv)

        self._notifier.notify_inventory_changed(inv)

        logger.info(
            "Received batch %s: %d of %s, expires %s",
            batch.batch_id, quantity, product.code, expiry_date,
        )
        return batch
