"""CLI commands for stock receipt and transfers."""

from __future__ import annotations

from datetime import datetime

import click

from sms.application.receive_batch import ReceiveBatchHandler
from sms.application.transfer_stock import TransferStockHandler, TransferType
from sms.domain.exceptions import DomainException, InconsistencyError
from sms.infrastructure.bootstrap import (
    clock,
    inventory_notifier,
    inventory_repository,
    product_repository,
    selection_strategy,
    stock_batch_repository,
)

_DESTINATIONS = {
    "shelf": TransferType.STORE_TO_SHELF,
    "online": TransferType.STORE_TO_ONLINE,
}


@click.command("receive")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option(
    "--expiry",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Expiry date (YYYY-MM-DD).",
)
def stock_receive(product_code: str, quantity: int, expiry: datetime) -> None:
    """Receive a new stock batch into the back store."""
    handler = ReceiveBatchHandler(
        product_repo=product_repository(),
        batch_repo=stock_batch_repository(),
        inventory_repo=inventory_repository(),
        notifier=inventory_notifier(),
        clock=clock(),
    )

    try:
        batch = handler.handle(product_code, quantity, expiry.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Batch {batch.batch_id} received: {batch.quantity} x {batch.product_code} "
        f"(expires {batch.expiry_date.isoformat()})"
    )


@click.command("transfer")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--quantity", required=True, type=int, help="Units to move.")
@click.option(
    "--to",
    "destination",
    required=True,
    type=click.Choice(sorted(_DESTINATIONS)),
    help="Where the units go.",
)
def stock_transfer(product_code: str, quantity: int, destination: str) -> None:
    """Move stock from the back store to the shelf or online."""
    handler = TransferStockHandler(
        inventory_repo=inventory_repository(),
        batch_repo=stock_batch_repository(),
        strategy=selection_strategy(),
        notifier=inventory_notifier(),
    )

    try:
        result = handler.handle(product_code, quantity, _DESTINATIONS[destination])
    except InconsistencyError as exc:
        raise click.ClickException(f"{exc} — batch ledger needs reconciliation")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Moved {result.quantity} x {result.product_code} to {destination}.")
    for draw in result.draws:
        click.echo(f"  batch {draw.batch_id}: {draw.quantity} (expires {draw.expiry_date})")
    click.echo(
        f"Now shelf={result.shelf_qty} store={result.store_qty} online={result.online_qty}"
    )
