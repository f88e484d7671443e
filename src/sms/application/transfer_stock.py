"""Application service: Transfer Stock use case.

Moves units out of the back store, onto the shelf or into the online
allocation. Whatever the destination, the units are drawn from the batch
pool with the same selection strategy a counter sale uses.

Batch draws are persisted one by one before the inventory is updated. If
the pool runs dry part-way, ``NoAvailableBatch`` is raised and the batches
already drawn in this call stay reduced.
"""

from __future__ import annotations

import logging
from enum import Enum

from sms.application.dto import BatchDrawDTO, TransferResultDTO
from sms.domain.exceptions import (
    InsufficientStoreQuantity,
    InventoryNotFound,
    InvalidQuantity,
    NoAvailableBatch,
)
from sms.domain.repository.inventory_repository import InventoryRepository
from sms.domain.repository.stock_batch_repository import StockBatchRepository
from sms.domain.service.batch_draw_service import BatchDrawService
from sms.domain.service.batch_selection import BatchSelectionStrategy
from sms.domain.service.inventory_notifier import InventoryNotifier

logger = logging.getLogger(__name__)


class TransferType(Enum):
    STORE_TO_SHELF = "STORE_TO_SHELF"
    STORE_TO_ONLINE = "STORE_TO_ONLINE"


class TransferStockHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        batch_repo: StockBatchRepository,
        strategy: BatchSelectionStrategy,
        notifier: InventoryNotifier,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._draws = BatchDrawService(batch_repo, strategy)
        self._notifier = notifier

    def handle(
        self,
        product_code: str,
        quantity: int,
        transfer_type: TransferType,
    ) -> TransferResultDTO:
        """Move *quantity* units of a product out of the store bucket."""
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        inv = self._inventory_repo.get_by_product_code(product_code)
        if inv is None:
            raise InventoryNotFound(product_code)
        if inv.store_qty < quantity:
            raise InsufficientStoreQuantity(product_code, inv.store_qty, quantity)

        draws = self._draws.draw(product_code, quantity, NoAvailableBatch)

        if transfer_type is TransferType.STORE_TO_SHELF:
            inv.transfer_store_to_shelf(quantity)
        else:
            inv.transfer_store_to_online(quantity)

        self._inventory_repo.update(inv)
        self._notifier.notify_inventory_changed(inv)

        logger.info(
            "Transferred %d of %s (%s) from %d batch(es)",
            quantity, product_code, transfer_type.value, len(draws),
        )

        return TransferResultDTO(
            product_code=product_code,
            quantity=quantity,
            transfer_type=transfer_type.value,
            draws=[
                BatchDrawDTO(
                    batch_id=d.batch_id,
                    quantity=d.quantity,
                    expiry_date=d.expiry_date.isoformat(),
                )
                for d in draws
            ],
            shelf_qty=inv.shelf_qty,
            store_qty=inv.store_qty,
            online_qty=inv.online_qty,
        )
