import click

from bookstore.infrastructure.cli.book_commands import book_list
from bookstore.infrastructure.cli.order_commands import order_place, order_show
from bookstore.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Bookstore order placement."""
    configure_logging()


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def book() -> None:
    """Browse the catalog."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
book.add_command(book_list)
