"""CLI commands for inventory queries."""

from __future__ import annotations

import click

from sms.application.show_inventory import (
    ReorderLevelsHandler,
    ReshelveHandler,
    ShowInventoryHandler,
)
from sms.application.stock_report import StockBatchReportHandler
from sms.domain.model.inventory import REORDER_THRESHOLD
from sms.infrastructure.bootstrap import (
    clock,
    inventory_repository,
    product_repository,
    stock_batch_repository,
)


@click.command("show")
def inventory_show() -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(inventory_repository(), product_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(
        f"{'Code':<8} {'Product':<20} {'Shelf':>6} {'Store':>6} {'Online':>7} {'Total':>6}"
    )
    click.echo("-" * 58)
    for line in lines:
        flag = "  LOW" if line.below_reorder else ""
        click.echo(
            f"{line.product_code:<8} {line.product_name:<20} {line.shelf:>6} "
            f"{line.store:>6} {line.online:>7} {line.total:>6}{flag}"
        )


@click.command("reorder")
def inventory_reorder() -> None:
    """List products below the reorder level."""
    handler = ReorderLevelsHandler(inventory_repository(), product_repository())
    lines = handler.handle()

    if not lines:
        click.echo(f"All products are at or above the reorder level ({REORDER_THRESHOLD}).")
        return

    click.echo(f"{'Code':<8} {'Product':<20} {'Total':>6} {'Reorder':>8}")
    click.echo("-" * 45)
    for line in lines:
        click.echo(
            f"{line.product_code:<8} {line.product_name:<20} {line.total:>6} "
            f"{line.reorder_quantity:>8}"
        )


@click.command("reshelve")
def inventory_reshelve() -> None:
    """Recommend store-to-shelf transfers for thin shelves."""
    handler = ReshelveHandler(inventory_repository(), product_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No products need reshelving.")
        return

    click.echo(f"{'Code':<8} {'Product':<20} {'Shelf':>6} {'Store':>6} {'Move':>6}")
    click.echo("-" * 50)
    for line in lines:
        click.echo(
            f"{line.product_code:<8} {line.product_name:<20} {line.shelf:>6} "
            f"{line.store:>6} {line.recommended:>6}"
        )
    click.echo(f"Total units to move: {sum(line.recommended for line in lines)}")


@click.command("batches")
def inventory_batches() -> None:
    """List every stock batch with its expiry status."""
    handler = StockBatchReportHandler(
        stock_batch_repository(), product_repository(), clock()
    )
    lines = handler.handle()

    if not lines:
        click.echo("No stock batches on record.")
        return

    click.echo(
        f"{'Batch':<7} {'Code':<8} {'Product':<20} {'Purchased':<10} "
        f"{'Qty':>6} {'Expires':<10} Status"
    )
    click.echo("-" * 80)
    for line in lines:
        click.echo(
            f"{line.batch_id:<7} {line.product_code:<8} {line.product_name:<20} "
            f"{line.purchase_date:<10} {line.quantity:>6} {line.expiry_date:<10} "
            f"{line.status}"
        )
    click.echo(f"Total batches: {len(lines)}")
