"""StockBatch entity — one dated receipt of stock for a product.

Batches are never deleted. A batch drawn down to zero stays in the ledger
as history.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sms.domain.exceptions import InvalidQuantity, ValidationError


@dataclass
class StockBatch:
    """A quantity-bearing batch with its own purchase and expiry dates.

    Use ``StockBatch.create()`` when receiving new stock; the plain
    constructor lets repositories reconstitute drawn-down batches whose
    quantity is already zero.
    """

    batch_id: str
    product_code: str
    purchase_date: date
    quantity: int
    expiry_date: date

    def __post_init__(self) -> None:
        if not self.batch_id or not self.batch_id.strip():
            raise ValidationError("Batch ID cannot be empty")
        if not self.product_code or not self.product_code.strip():
            raise ValidationError("Product code cannot be empty")
        if self.quantity < 0:
            raise ValidationError("Batch quantity cannot be negative")
        if self.expiry_date < self.purchase_date:
            raise ValidationError("Expiry date cannot be before purchase date")

    @staticmethod
    def create(
        batch_id: str,
        product_code: str,
        purchase_date: date,
        quantity: int,
        expiry_date: date,
    ) -> StockBatch:
        """Create a freshly received batch. Quantity must be positive."""
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        return StockBatch(
            batch_id=batch_id,
            product_code=product_code,
            purchase_date=purchase_date,
            quantity=quantity,
            expiry_date=expiry_date,
        )

    def is_expired(self, today: date) -> bool:
        return today > self.expiry_date

    def days_until_expiry(self, today: date) -> int:
        return (self.expiry_date - today).days

    def reduce_quantity(self, amount: int) -> None:
        if amount <= 0:
            raise InvalidQuantity(amount, what="Amount")
        if amount > self.quantity:
            raise ValidationError(
                f"Cannot reduce batch {self.batch_id} by {amount} "
                f"— only {self.quantity} left"
            )
        self.quantity -= amount
