"""Inventory aggregate — tracks stock per product across three buckets.

Each product has one Inventory that knows how many units sit on the shelf,
in the back store, and in the online allocation.
"""

from __future__ import annotations

from dataclasses import dataclass

from sms.domain.exceptions import InsufficientQuantity, InvalidQuantity, ValidationError

REORDER_THRESHOLD = 50

SHELF = "shelf"
STORE = "store"
ONLINE = "online"


@dataclass
class Inventory:
    """Aggregate root for inventory tracking.

    Invariants:
    - every bucket is >= 0
    - a failed operation leaves all buckets unchanged
    """

    product_code: str
    shelf_qty: int = 0
    store_qty: int = 0
    online_qty: int = 0

    def __post_init__(self) -> None:
        if not self.product_code or not self.product_code.strip():
            raise ValidationError("Product code cannot be empty")
        for bucket in (SHELF, STORE, ONLINE):
            if self._get(bucket) < 0:
                raise ValidationError(f"{bucket.capitalize()} quantity cannot be negative")

    @property
    def total(self) -> int:
        return self.shelf_qty + self.store_qty + self.online_qty

    def is_below_reorder(self) -> bool:
        return self.total < REORDER_THRESHOLD

    # --- Additions ------------------------------------------------------------

    def add_to_shelf(self, quantity: int) -> None:
        self._add(SHELF, quantity)

    def add_to_store(self, quantity: int) -> None:
        self._add(STORE, quantity)

    def add_to_online(self, quantity: int) -> None:
        self._add(ONLINE, quantity)

    # --- Reductions -----------------------------------------------------------

    def reduce_from_shelf(self, quantity: int) -> None:
        self._reduce(SHELF, quantity)

    def reduce_from_store(self, quantity: int) -> None:
        self._reduce(STORE, quantity)

    def reduce_from_online(self, quantity: int) -> None:
        self._reduce(ONLINE, quantity)

    # --- Transfers ------------------------------------------------------------

    def transfer_store_to_shelf(self, quantity: int) -> None:
        """Move units from the back store onto the shelf.

        The reduce runs first, so an insufficient store bucket raises
        before anything changes.
        """
        self.reduce_from_store(quantity)
        self.add_to_shelf(quantity)

    def transfer_store_to_online(self, quantity: int) -> None:
        self.reduce_from_store(quantity)
        self.add_to_online(quantity)

    # --- Internal helpers -----------------------------------------------------

    def _get(self, bucket: str) -> int:
        return getattr(self, f"{bucket}_qty")

    def _add(self, bucket: str, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        setattr(self, f"{bucket}_qty", self._get(bucket) + quantity)

    def _reduce(self, bucket: str, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        current = self._get(bucket)
        if quantity > current:
            raise InsufficientQuantity(bucket, available=current, requested=quantity)
        setattr(self, f"{bucket}_qty", current - quantity)
