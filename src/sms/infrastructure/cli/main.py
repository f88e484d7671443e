import logging

import click

from sms.domain.exceptions import DomainException
from sms.infrastructure.bootstrap import strategy_name
from sms.infrastructure.cli.inventory_commands import (
    inventory_batches,
    inventory_reorder,
    inventory_reshelve,
    inventory_show,
)
from sms.infrastructure.cli.product_commands import product_add, product_list
from sms.infrastructure.cli.report_commands import report_sales
from sms.infrastructure.cli.sale_commands import bill_list, bill_show, sale_process
from sms.infrastructure.cli.stock_commands import stock_receive, stock_transfer

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """SMS — Store Management System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    try:
        strategy_name()
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Receive and move stock."""


@cli.group()
def sale() -> None:
    """Process sales."""


@cli.group()
def bill() -> None:
    """Look up bills."""


@cli.group()
def inventory() -> None:
    """Inspect inventory."""


@cli.group()
def report() -> None:
    """Sales reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
stock.add_command(stock_receive)
stock.add_command(stock_transfer)
sale.add_command(sale_process)
bill.add_command(bill_show)
bill.add_command(bill_list)
inventory.add_command(inventory_show)
inventory.add_command(inventory_reorder)
inventory.add_command(inventory_reshelve)
inventory.add_command(inventory_batches)
report.add_command(report_sales)
