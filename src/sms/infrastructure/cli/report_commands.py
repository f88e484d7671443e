"""CLI commands for sales reports."""

from __future__ import annotations

from datetime import datetime

import click

from sms.application.sales_report import DailySalesHandler
from sms.domain.model.bill import Channel
from sms.infrastructure.bootstrap import bill_repository, clock


@click.command("sales")
@click.option(
    "--date", "day", default=None, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Day to report (YYYY-MM-DD). Defaults to today.",
)
@click.option(
    "--channel", default=None, type=click.Choice(["counter", "online"]),
    help="Only include sales from one channel.",
)
def report_sales(day: datetime | None, channel: str | None) -> None:
    """Total the sales of one day, per product."""
    handler = DailySalesHandler(bill_repo=bill_repository())
    report = handler.handle(
        day.date() if day is not None else clock().today(),
        Channel(channel.upper()) if channel else None,
    )

    click.echo(f"Sales for {report.date} ({report.channel})")
    if not report.lines:
        click.echo("No sales recorded for this date.")
        return

    click.echo(f"{'Code':<8} {'Product':<20} {'Qty':>6} {'Revenue':>16}")
    click.echo("-" * 53)
    for line in report.lines:
        click.echo(
            f"{line.product_code:<8} {line.product_name:<20} {line.quantity:>6} "
            f"{line.revenue:>16}"
        )
    click.echo("-" * 53)
    click.echo(f"Total revenue: {report.total_revenue}")
    click.echo(f"Transactions: {report.transactions}")
