"""CLI commands for coupons."""

from __future__ import annotations

import click

from shopcart.application.coupon_queries import (
    CalculateCouponDiscountHandler,
    ListCouponsHandler,
    ListUsableCouponsHandler,
)
from shopcart.application.issue_coupon import IssueCouponHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import unit_of_work


@click.command("issue")
@click.option("--member", "member_id", required=True, type=int, help="Owning member ID.")
@click.option("--name", required=True, help="Coupon name.")
@click.option("--discount", required=True, type=int, help="Amount taken off the total.")
@click.option("--min-amount", required=True, type=int, help="Minimum qualifying total.")
def coupon_issue(member_id: int, name: str, discount: int, min_amount: int) -> None:
    """Issue a coupon to a member."""
    handler = IssueCouponHandler(uow=unit_of_work())

    try:
        coupon = handler.handle(
            member_id=member_id,
            name=name,
            discount_amount=discount,
            min_amount=min_amount,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coupon #{coupon.id} '{coupon.name}' issued to member {member_id}")


@click.command("list")
def coupon_list() -> None:
    """List every coupon."""
    coupons = ListCouponsHandler(uow=unit_of_work()).handle()

    if not coupons:
        click.echo("No coupons found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Minimum':>10} {'Discount':>10} {'Used':>6}")
    click.echo("-" * 56)
    for c in coupons:
        click.echo(
            f"{c.id:<6} {c.name:<20} {c.min_amount:>10,} {c.discount_amount:>10,} {'yes' if c.used else 'no':>6}"
        )


@click.command("usable")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
def coupon_usable(member_id: int) -> None:
    """List a member's unused coupons."""
    coupons = ListUsableCouponsHandler(uow=unit_of_work()).handle(member_id)

    if not coupons:
        click.echo("No usable coupons.")
        return

    for c in coupons:
        click.echo(f"{c.id:<6} {c.name:<20} min {c.min_amount:,}")


@click.command("discount")
@click.option("--id", "coupon_id", required=True, type=int, help="Coupon ID.")
@click.option("--total", required=True, type=int, help="Product total to discount.")
def coupon_discount(coupon_id: int, total: int) -> None:
    """Show what a coupon would leave of a total."""
    handler = CalculateCouponDiscountHandler(uow=unit_of_work())

    try:
        dto = handler.handle(coupon_id=coupon_id, total_amount=total)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discounted total: {dto.discounted_amount:,}")
