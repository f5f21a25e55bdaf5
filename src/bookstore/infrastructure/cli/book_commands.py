"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from bookstore.infrastructure.bootstrap import book_repository


@click.command("list")
def book_list() -> None:
    """List all books in the catalog."""
    books = book_repository().list_all()

    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Author':<20} {'Category':>8} {'Price':>10}")
    click.echo("-" * 78)
    for b in books:
        click.echo(
            f"{b.id:<6} {b.title[:30]:<30} {b.author[:20]:<20} {b.category_id:>8} {str(b.unit_price):>10}"
        )
