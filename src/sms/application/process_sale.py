"""Application service: Process Sale use case.

Validates a whole cart against inventory, writes the bill, then deducts
stock line by line.

The two phases mirror the reservation flow elsewhere in the domain:
  Phase 1: load and validate every line. Any failure here leaves the
            inventory, the batches and the bill store untouched.
  Phase 2: persist the bill, then for each line reduce the channel bucket,
            (counter sales only) draw the same units from the batch pool,
            update the inventory and notify listeners.

Phase 2 is not one transaction. If the batch pool cannot cover a counter
line, ``BatchExhaustion`` is raised with the bill already stored and the
earlier lines already deducted. The inconsistency is reported, never
repaired here.

Online sales only reduce the online bucket. Their units left the batch
pool when they were transferred from store to online.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from sms.application.dto import SaleLine
from sms.domain.clock import Clock, SystemClock
from sms.domain.exceptions import (
    BatchExhaustion,
    InsufficientStock,
    InventoryNotFound,
    InvalidQuantity,
    ProductNotFound,
    ValidationError,
)
from sms.domain.model.bill import Bill, BillItem, Channel
from sms.domain.model.inventory import Inventory
from sms.domain.model.value_objects import Money, Quantity
from sms.domain.repository.bill_repository import BillRepository
from sms.domain.repository.inventory_repository import InventoryRepository
from sms.domain.repository.product_repository import ProductRepository
from sms.domain.repository.stock_batch_repository import StockBatchRepository
from sms.domain.service.batch_draw_service import BatchDrawService
from sms.domain.service.batch_selection import BatchSelectionStrategy
from sms.domain.service.inventory_notifier import InventoryNotifier

logger = logging.getLogger(__name__)


class ProcessSaleHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        bill_repo: BillRepository,
        inventory_repo: InventoryRepository,
        batch_repo: StockBatchRepository,
        strategy: BatchSelectionStrategy,
        notifier: InventoryNotifier,
        clock: Clock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._bill_repo = bill_repo
        self._inventory_repo = inventory_repo
        self._draws = BatchDrawService(batch_repo, strategy)
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def handle(
        self,
        lines: list[SaleLine],
        cash_tendered: str | Decimal | Money,
        channel: Channel = Channel.COUNTER,
        customer_id: str | None = None,
    ) -> Bill:
        """Process a sale and return the stored bill."""
        cash = self._parse_cash(cash_tendered)
        if not lines:
            raise ValidationError("Sale must have at least one item")
        for line in lines:
            if line.quantity <= 0:
                raise InvalidQuantity(line.quantity)

        # Phase 1: load and validate everything
        inventories: dict[str, Inventory] = {}
        requested: dict[str, int] = {}
        bill_items: list[BillItem] = []

        for line in lines:
            product = self._product_repo.get_by_code(line.product_code)
            if product is None:
                raise ProductNotFound(line.product_code)

            inv = inventories.get(product.code)
            if inv is None:
                inv = self._inventory_repo.get_by_product_code(product.code)
                if inv is None:
                    raise InventoryNotFound(product.code)
                inventories[product.code] = inv

            # Repeated lines for one product are checked against their sum
            requested[product.code] = requested.get(product.code, 0) + line.quantity
            available = self._available(inv, channel)
            if available < requested[product.code]:
                raise InsufficientStock(
                    product.code, product.name, available, requested[product.code]
                )

            bill_items.append(
                BillItem(
                    product_code=product.code,
                    product_name=product.name,
                    unit=product.unit,
                    quantity=Quantity(line.quantity),
                    unit_price=product.price,  # <-- price snapshot
                    discount_percentage=product.discount_percentage,
                )
            )

        bill = Bill.create(
            serial_number=self._bill_repo.next_serial_number(),
            items=bill_items,
            cash_tendered=cash,
            channel=channel,
            customer_id=customer_id,
            date=self._clock.now(),
        )
        self._bill_repo.save(bill)

        # Phase 2: mutate and persist, line by line
        for item in bill.items:
            inv = inventories[item.product_code]
            qty = item.quantity.value
            if channel is Channel.COUNTER:
                inv.reduce_from_shelf(qty)
                self._draws.draw(item.product_code, qty, BatchExhaustion)
            else:
                inv.reduce_from_online(qty)

            self._inventory_repo.update(inv)
            self._notifier.notify_inventory_changed(inv)

        logger.info(
            "Bill #%d: %s sale of %d line(s), total %s",
            bill.serial_number, channel.value, len(bill.items), bill.total,
        )
        return bill

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _available(inv: Inventory, channel: Channel) -> int:
        if channel is Channel.COUNTER:
            return inv.shelf_qty
        return inv.online_qty

    @staticmethod
    def _parse_cash(raw: str | Decimal | Money) -> Money:
        if isinstance(raw, Money):
            return raw
        try:
            amount = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid cash amount: {raw!r}") from exc
        if not amount.is_finite():
            raise ValidationError(f"Invalid cash amount: {raw!r}")
        if amount < 0:
            raise ValidationError("Cash tendered cannot be negative")
        return Money(amount)
