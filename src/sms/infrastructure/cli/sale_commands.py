"""CLI commands for sales and bills."""

from __future__ import annotations

import click

from sms.application.dto import BillDTO, SaleLine, bill_to_dto
from sms.application.process_sale import ProcessSaleHandler
from sms.application.show_bill import ListBillsHandler, ShowBillHandler
from sms.domain.exceptions import DomainException, InconsistencyError
from sms.domain.model.bill import Channel
from sms.infrastructure.bootstrap import (
    bill_repository,
    clock,
    inventory_notifier,
    inventory_repository,
    product_repository,
    selection_strategy,
    stock_batch_repository,
)


def _parse_items(raw: str) -> list[SaleLine]:
    """Parse 'P001:3,P002:5' into SaleLine list."""
    lines: list[SaleLine] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductCode:Quantity'."
            )
        code, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{code}'."
            )
        lines.append(SaleLine(product_code=code.strip(), quantity=qty))
    return lines


def _display_bill(dto: BillDTO) -> None:
    """Shared formatting for displaying a bill."""
    click.echo(f"Bill #{dto.serial_number}  ({dto.channel})  {dto.date}")
    if dto.customer_id:
        click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>14} {'Disc':>6} {'Total':>14}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>14} "
            f"{item.discount_percentage:>6} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>36}")
    click.echo(f"  {'Discount':<27} {dto.discount:>36}")
    click.echo(f"  {'Total':<27} {dto.total:>36}")
    click.echo(f"  {'Cash':<27} {dto.cash_tendered:>36}")
    click.echo(f"  {'Change':<27} {dto.change:>36}")


@click.command("process")
@click.option("--items", required=True, help="Items as 'Code:Qty,Code:Qty'.")
@click.option("--cash", required=True, help="Cash tendered (e.g. 900.00).")
@click.option("--online", is_flag=True, default=False, help="Sell from the online allocation.")
@click.option("--customer", "customer_id", default=None, help="Customer reference (online sales).")
def sale_process(items: str, cash: str, online: bool, customer_id: str | None) -> None:
    """Process a sale and print the bill."""
    lines = _parse_items(items)

    handler = ProcessSaleHandler(
        product_repo=product_repository(),
        bill_repo=bill_repository(),
        inventory_repo=inventory_repository(),
        batch_repo=stock_batch_repository(),
        strategy=selection_strategy(),
        notifier=inventory_notifier(),
        clock=clock(),
    )

    try:
        bill = handler.handle(
            lines,
            cash,
            channel=Channel.ONLINE if online else Channel.COUNTER,
            customer_id=customer_id,
        )
    except InconsistencyError as exc:
        raise click.ClickException(f"{exc} — batch ledger needs reconciliation")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(bill_to_dto(bill))


@click.command("show")
@click.option("--serial", required=True, type=int, help="Bill serial number.")
def bill_show(serial: int) -> None:
    """Show a stored bill."""
    handler = ShowBillHandler(bill_repo=bill_repository())

    try:
        dto = handler.handle(serial)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(dto)


@click.command("list")
def bill_list() -> None:
    """List all stored bills."""
    bills = ListBillsHandler(bill_repo=bill_repository()).handle()

    if not bills:
        click.echo("No bills found.")
        return

    click.echo(f"{'Serial':>6}  {'Date':<16} {'Channel':<8} {'Items':>5} {'Total':>16}")
    click.echo("-" * 56)
    for dto in bills:
        click.echo(
            f"{dto.serial_number:>6}  {dto.date:<16} {dto.channel:<8} "
            f"{len(dto.items):>5} {dto.total:>16}"
        )
