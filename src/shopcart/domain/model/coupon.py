"""Coupon value and the rules for spending it.

A coupon is owned by exactly one member; ownership is part of the
repository key, not of the value itself.  State changes never mutate a
coupon in place: ``use()`` hands back a new value that the caller must
persist.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.exceptions import (
    BelowMinimumError,
    CouponAlreadyUsedError,
    DiscountExceedsTotalError,
)
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Coupon:

    id: int | None
    name: str
    discount_amount: Money
    min_amount: Money
    used: bool = False

    def use(self) -> Coupon:
        """Return the spent version of this coupon."""
        if self.used:
            raise CouponAlreadyUsedError(f"Coupon '{self.name}' has already been used")
        return replace(self, used=True)

    def calculate_discount(self, total_amount: Money) -> Money:
        """Return *total_amount* after this coupon's discount.

        A coupon that does not qualify is an error, never a silent
        zero discount.
        """
        if total_amount < self.min_amount:
            raise BelowMinimumError(
                f"Total {total_amount} is below the coupon minimum {self.min_amount}"
            )
        if self.discount_amount > total_amount:
            raise DiscountExceedsTotalError(
                f"Coupon discount {self.discount_amount} exceeds total {total_amount}"
            )
        return total_amount - self.discount_amount
