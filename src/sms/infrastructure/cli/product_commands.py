"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from sms.application.add_product import AddProductHandler
from sms.domain.exceptions import DomainException
from sms.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--code", required=True, help="Unique product code (e.g. P001).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 100.00).")
@click.option("--unit", default="pcs", show_default=True, help="Unit label.")
@click.option("--discount", default="0", show_default=True, help="Discount percentage.")
def product_add(code: str, name: str, price: str, unit: str, discount: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            code=code, name=name, price=price, unit=unit, discount_percentage=discount
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.code} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Code':<8} {'Name':<20} {'Unit':<6} {'Price':>14} {'Disc%':>6}")
    click.echo("-" * 58)
    for p in products:
        click.echo(
            f"{p.code:<8} {p.name:<20} {p.unit:<6} {str(p.price):>14} "
            f"{str(p.discount_percentage):>6}"
        )
