"""Product aggregate.

Products live independently of sales. The sale core only ever reads them;
a bill copies the fields it needs at sale time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from sms.domain.exceptions import ValidationError
from sms.domain.model.value_objects import Money

DEFAULT_UNIT = "pcs"


@dataclass
class Product:
    """A product in the catalog, identified by its unique code."""

    code: str
    name: str
    price: Money
    unit: str = DEFAULT_UNIT
    discount_percentage: Decimal = field(default_factory=lambda: Decimal("0"))

    @staticmethod
    def create(
        code: str,
        name: str,
        price: Money,
        unit: str = DEFAULT_UNIT,
        discount_percentage: Decimal | str | int = Decimal("0"),
    ) -> Product:
        """Create a new catalog product, enforcing all invariants."""
        if not code or not code.strip():
            raise ValidationError("Product code cannot be empty")
        if not name or not name.strip():
            raise ValidationError("Product name cannot be empty")
        if not unit or not unit.strip():
            raise ValidationError("Product unit cannot be empty")

        try:
            discount = Decimal(str(discount_percentage))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid discount percentage: {discount_percentage!r}"
            ) from exc
        if not discount.is_finite() or discount < 0 or discount > 100:
            raise ValidationError("Discount percentage must be between 0 and 100")

        return Product(
            code=code.strip(),
            name=name.strip(),
            price=price,
            unit=unit.strip(),
            discount_percentage=discount,
        )

    @property
    def discounted_price(self) -> Money:
        return self.price - self.price.percentage(self.discount_percentage)
