"""CLI commands for placing and showing orders."""

from __future__ import annotations

import click

from bookstore.application.dto import CartItemSpec, OrderDetailsDTO
from bookstore.domain.exceptions import DomainException, EntityNotFoundError
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.model.customer import CustomerForm
from bookstore.infrastructure.bootstrap import (
    book_repository,
    place_order_handler,
    show_order_details_handler,
    surcharge,
)


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1001:2,1004:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'BookId:Quantity'."
            )
        book_str, qty_str = pair.rsplit(":", 1)
        try:
            specs.append(CartItemSpec(book_id=int(book_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. IDs and quantities are integers.")
    return specs


def _build_cart(specs: list[CartItemSpec]) -> ShoppingCart:
    """Fill a cart from the catalog as it is right now."""
    books = book_repository()
    cart = ShoppingCart(surcharge=surcharge())
    for spec in specs:
        book = books.get_by_id(spec.book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{spec.book_id} not found")
        cart.add(book, spec.quantity)
    return cart


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--phone", required=True, help="Ten-digit phone number.")
@click.option("--email", required=True, help="E-mail address.")
@click.option("--cc-number", required=True, help="Credit card number.")
@click.option("--cc-expiry-month", default="", help="Card expiry month (1-12).")
@click.option("--cc-expiry-year", default="", help="Card expiry year (e.g. 2030).")
@click.option("--items", required=True, help="Items as 'BookId:Qty,BookId:Qty'.")
def order_place(
    name: str,
    address: str,
    phone: str,
    email: str,
    cc_number: str,
    cc_expiry_month: str,
    cc_expiry_year: str,
    items: str,
) -> None:
    """Place a new order."""
    specs = _parse_items(items)
    form = CustomerForm(
        name=name,
        address=address,
        phone=phone,
        email=email,
        cc_number=cc_number,
        cc_expiry_month=cc_expiry_month,
        cc_expiry_year=cc_expiry_year,
    )

    try:
        cart = _build_cart(specs)
        order_id = place_order_handler().handle(form, cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} placed.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of a placed order."""
    try:
        details = show_order_details_handler().handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = OrderDetailsDTO.of(details)
    click.echo(f"Order #{dto.id}  (confirmation {dto.confirmation_number})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Card:     {dto.cc_number}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Title':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*57}")
    for item in dto.items:
        click.echo(
            f"  {item.title[:30]:<30} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Order Total (incl. surcharge)':<37} {dto.total:>20}")
