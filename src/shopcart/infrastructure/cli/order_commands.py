"""CLI commands for placing and viewing orders."""

from __future__ import annotations

import click

from shopcart.application.dto import OrderDTO, OrderRequest
from shopcart.application.place_order import PlaceOrderHandler
from shopcart.application.show_order import ListOrdersHandler, ShowOrderHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.service.pricing_verifier import CartLineSpec
from shopcart.infrastructure.bootstrap import unit_of_work


def _parse_item(raw: str) -> CartLineSpec:
    """Parse '3:2' (product ID 3, quantity 2) into a CartLineSpec."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductId:Quantity'."
        )
    id_str, qty_str = raw.strip().split(":", 1)
    try:
        return CartLineSpec(product_id=int(id_str), quantity=int(qty_str))
    except ValueError:
        raise click.BadParameter(f"Invalid item '{raw}'. Both parts must be integers.")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Address:  {dto.address}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.products:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.price:>10,} {item.price * item.quantity:>10,}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Products':<27} {dto.total_amount:>20,}")
    click.echo(f"  {'After coupon':<27} {dto.discounted_amount:>20,}")
    click.echo(f"  {'Delivery':<27} {dto.delivery_amount:>20,}")


@click.command("place")
@click.option("--member", "member_id", required=True, type=int, help="Ordering member ID.")
@click.option("--item", "items", required=True, multiple=True, help="Item as 'ProductId:Qty' (repeatable).")
@click.option("--total", required=True, type=int, help="Product total shown to the member.")
@click.option("--delivery", default=0, show_default=True, type=int, help="Delivery amount.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--coupon", "coupon_id", default=None, type=int, help="Coupon ID to apply.")
def order_place(
    member_id: int,
    items: tuple[str, ...],
    total: int,
    delivery: int,
    address: str,
    coupon_id: int | None,
) -> None:
    """Place an order from cart lines."""
    request = OrderRequest(
        lines=[_parse_item(raw) for raw in items],
        total_amount=total,
        delivery_amount=delivery,
        address=address,
        coupon_id=coupon_id,
    )
    handler = PlaceOrderHandler(uow=unit_of_work())

    try:
        dto = handler.handle(request, member_id=member_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow=unit_of_work())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
def order_list(member_id: int) -> None:
    """List a member's orders."""
    summaries = ListOrdersHandler(uow=unit_of_work()).handle(member_id)

    if not summaries:
        click.echo("No orders found.")
        return

    for summary in summaries:
        products = ", ".join(f"{p.name} x{p.quantity}" for p in summary.products)
        click.echo(f"#{summary.id:<6} {products}")
