import click

from ecshop.infrastructure.bootstrap import DEFAULT_LOG_LEVEL, configure_logging
from ecshop.infrastructure.cli.order_commands import (
    order_status,
    order_statuses,
    order_summarize,
    order_validate,
)


@click.group()
@click.option(
    "--log-level",
    envvar="ECSHOP_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """ECShop order request tooling"""
    configure_logging(log_level)


@cli.group()
def order() -> None:
    """Validate and inspect orders."""


# Register subcommands
order.add_command(order_status)
order.add_command(order_statuses)
order.add_command(order_summarize)
order.add_command(order_validate)
