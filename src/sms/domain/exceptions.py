"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

The hierarchy has four families:

- ``ValidationError``            malformed input, nothing was touched
- ``EntityNotFoundError``        a product or inventory record is missing
- ``InsufficientResourceError``  a quantity check failed before mutation
- ``InconsistencyError``         a mutation step could not complete although
                                 validation said it would; needs an operator
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


# --- Validation ---------------------------------------------------------------


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantity(ValidationError):
    """A quantity that must be positive was zero or negative."""

    def __init__(self, quantity: int, what: str = "Quantity") -> None:
        super().__init__(f"{what} must be positive, got {quantity}")
        self.quantity = quantity


class InsufficientPayment(ValidationError):
    """Cash tendered does not cover the bill total."""


# --- Not found ----------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):

    def __init__(self, product_code: str) -> None:
        super().__init__(f"Product not found: '{product_code}'")
        self.product_code = product_code


class InventoryNotFound(EntityNotFoundError):

    def __init__(self, product_code: str) -> None:
        super().__init__(f"No inventory record for product '{product_code}'")
        self.product_code = product_code


# --- Insufficient resources ---------------------------------------------------


class InsufficientResourceError(DomainException):
    """Not enough stock to satisfy the request. Nothing was mutated."""

    def __init__(self, message: str, available: int, requested: int) -> None:
        super().__init__(message)
        self.available = available
        self.requested = requested


class InsufficientQuantity(InsufficientResourceError):
    """A bucket reduction would drive the bucket negative."""

    def __init__(self, bucket: str, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient {bucket} quantity "
            f"(need {requested}, have {available})",
            available,
            requested,
        )
        self.bucket = bucket


class InsufficientStock(InsufficientResourceError):
    """A sale line asks for more than its channel bucket holds."""

    def __init__(
        self, product_code: str, product_name: str, available: int, requested: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(available: {available}, requested: {requested})",
            available,
            requested,
        )
        self.product_code = product_code
        self.product_name = product_name


class InsufficientStoreQuantity(InsufficientResourceError):
    """A transfer asks for more than the store bucket holds."""

    def __init__(self, product_code: str, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient store quantity for '{product_code}' "
            f"(available: {available}, requested: {requested})",
            available,
            requested,
        )
        self.product_code = product_code


# --- Inconsistencies ----------------------------------------------------------


class InconsistencyError(DomainException):
    """The inventory ledger and the batch ledger disagree.

    Raised after validation has passed, so earlier mutation steps of the
    same operation may already be persisted. Never retried automatically.
    """

    def __init__(self, message: str, product_code: str, remaining: int) -> None:
        super().__init__(message)
        self.product_code = product_code
        self.remaining = remaining


class BatchExhaustion(InconsistencyError):
    """A sale could not draw its quantity from the product's batches."""

    def __init__(self, product_code: str, remaining: int) -> None:
        super().__init__(
            f"No suitable stock batch available for product '{product_code}' "
            f"({remaining} units unaccounted for)",
            product_code,
            remaining,
        )


class NoAvailableBatch(InconsistencyError):
    """A transfer could not draw its quantity from the product's batches."""

    def __init__(self, product_code: str, remaining: int) -> None:
        super().__init__(
            f"No available batches for product '{product_code}' "
            f"({remaining} units still to transfer)",
            product_code,
            remaining,
        )
