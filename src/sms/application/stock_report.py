"""Application service: batch-wise stock report (query)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sms.domain.clock import Clock, SystemClock
from sms.domain.model.stock_batch import StockBatch
from sms.domain.repository.product_repository import ProductRepository
from sms.domain.repository.stock_batch_repository import StockBatchRepository

# Batches expiring in fewer days than this are flagged
EXPIRING_SOON_DAYS = 30

EXPIRED = "EXPIRED"
EXPIRING_SOON = "EXPIRING SOON"
OK = "OK"


@dataclass(frozen=True)
class BatchLineDTO:
    batch_id: str
    product_code: str
    product_name: str
    purchase_date: str
    quantity: int
    expiry_date: str
    days_until_expiry: int
    status: str


class StockBatchReportHandler:
    """Every batch on record, in receipt order, with its expiry status."""

    def __init__(
        self,
        batch_repo: StockBatchRepository,
        product_repo: ProductRepository,
        clock: Clock | None = None,
    ) -> None:
        self._batch_repo = batch_repo
        self._product_repo = product_repo
        self._clock = clock or SystemClock()

    def handle(self) -> list[BatchLineDTO]:
        today = self._clock.today()
        lines: list[BatchLineDTO] = []
        for batch in self._batch_repo.list_all():
            product = self._product_repo.get_by_code(batch.product_code)
            lines.append(
                BatchLineDTO(
                    batch_id=batch.batch_id,
                    product_code=batch.product_code,
                    product_name=product.name if product is not None else "Unknown",
                    purchase_date=batch.purchase_date.isoformat(),
                    quantity=batch.quantity,
                    expiry_date=batch.expiry_date.isoformat(),
                    days_until_expiry=batch.days_until_expiry(today),
                    status=self._status(batch, today),
                )
            )
        return lines

    @staticmethod
    def _status(batch: StockBatch, today: date) -> str:
        if batch.is_expired(today):
            return EXPIRED
        if batch.days_until_expiry(today) < EXPIRING_SOON_DAYS:
            return EXPIRING_SOON
        return OK
