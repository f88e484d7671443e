"""Abstract repository for StockBatch entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sms.domain.model.stock_batch import StockBatch


class StockBatchRepository(ABC):

    @abstractmethod
    def next_batch_id(self) -> str:
        """Issue a new unique batch identifier."""

    @abstractmethod
    def get_by_id(self, batch_id: str) -> StockBatch | None:
        """Return a batch by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[StockBatch]:
        """Return every batch, in the order they were received."""

    @abstractmethod
    def list_by_product(self, product_code: str) -> list[StockBatch]:
        """Return every batch of a product, in the order they were received."""

    @abstractmethod
    def save(self, batch: StockBatch) -> None:
        """Persist a newly received batch."""

    @abstractmethod
    def update(self, batch: StockBatch) -> None:
        """Persist the quantity of an existing batch.

        Raises EntityNotFoundError if the batch was never saved.
        """
