import click
from pydantic import ValidationError as SettingsError

from shopcart.infrastructure.bootstrap import configure_logging
from shopcart.infrastructure.cli.cart_commands import cart_add, cart_list
from shopcart.infrastructure.cli.coupon_commands import (
    coupon_discount,
    coupon_issue,
    coupon_list,
    coupon_usable,
)
from shopcart.infrastructure.cli.order_commands import order_list, order_place, order_show
from shopcart.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """shopcart — cart checkout and coupons"""
    try:
        configure_logging(verbose)
    except SettingsError as exc:
        raise click.UsageError(f"Invalid settings: {exc.errors()[0]['msg']}") from exc


@cli.group()
def order() -> None:
    """Place and view orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def coupon() -> None:
    """Manage coupons."""


@cli.group()
def cart() -> None:
    """Manage carts."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
coupon.add_command(coupon_issue)
coupon.add_command(coupon_list)
coupon.add_command(coupon_usable)
coupon.add_command(coupon_discount)
cart.add_command(cart_add)
cart.add_command(cart_list)
