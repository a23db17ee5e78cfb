"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=int, help="Price in minor units (e.g. 5000).")
@click.option("--image-url", default="", help="Image reference.")
def product_add(name: str, price: int, image_url: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(uow=unit_of_work())

    try:
        product = handler.handle(name=name, price=price, image_url=image_url)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    uow = unit_of_work()
    with uow:
        products = uow.products.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, type=int, help="New price in minor units.")
def product_update(product_id: int, price: int) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(uow=unit_of_work())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} price updated to {product.price}")
