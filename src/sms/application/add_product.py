"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from sms.domain.exceptions import ValidationError
from sms.domain.model.product import DEFAULT_UNIT, Product
from sms.domain.model.value_objects import Money
from sms.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        unit: str = DEFAULT_UNIT,
        discount_percentage: str = "0",
    ) -> Product:
        """Add a new product to the catalog."""
        if code and self._product_repo.get_by_code(code.strip()) is not None:
            raise ValidationError(f"Product '{code}' already exists")

        try:
            discount = Decimal(str(discount_percentage))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid discount percentage: {discount_percentage!r}"
            ) from exc
        if not discount.is_finite():
            raise ValidationError(
                f"Invalid discount percentage: {discount_percentage!r}"
            )

        product = Product.create(
            code=code,
            name=name,
            price=Money.of(price),
            unit=unit,
            discount_percentage=discount,
        )
        self._product_repo.save(product)
        return product
