"""CLI commands for a member's cart."""

from __future__ import annotations

import click

from shopcart.application.cart_items import AddCartItemHandler, ListCartItemsHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Quantity to add.")
def cart_add(member_id: int, product_id: int, quantity: int) -> None:
    """Put a product in a member's cart."""
    handler = AddCartItemHandler(uow=unit_of_work())

    try:
        item = handler.handle(member_id=member_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart now holds {item.quantity} of product #{product_id}")


@click.command("list")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
def cart_list(member_id: int) -> None:
    """Show a member's cart."""
    try:
        items = ListCartItemsHandler(uow=unit_of_work()).handle(member_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo("-" * 37)
    for item in items:
        click.echo(f"{item.product_name:<20} {item.quantity:>5} {item.price:>10,}")
