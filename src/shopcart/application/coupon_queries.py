"""Application service: coupon queries.

Read-only use cases: listing coupons and previewing what a coupon would
take off a given total.  Nothing here marks a coupon as used.
"""

from __future__ import annotations

from shopcart.application.dto import CouponDiscountDTO, CouponDTO, UsableCouponDTO
from shopcart.domain.exceptions import CouponNotFoundError
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork


class ListCouponsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[CouponDTO]:
        with self._uow as uow:
            return [
                CouponDTO(
                    id=coupon.id,  # type: ignore[arg-type]
                    name=coupon.name,
                    min_amount=coupon.min_amount.amount,
                    discount_amount=coupon.discount_amount.amount,
                    used=coupon.used,
                )
                for coupon in uow.coupons.find_all()
            ]


class ListUsableCouponsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> list[UsableCouponDTO]:
        """Coupons the member still holds, with the minimum each requires."""
        with self._uow as uow:
            return [
                UsableCouponDTO(
                    id=coupon.id,  # type: ignore[arg-type]
                    name=coupon.name,
                    min_amount=coupon.min_amount.amount,
                )
                for coupon in uow.coupons.find_unused_by_member(member_id)
            ]


class CalculateCouponDiscountHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, coupon_id: int, total_amount: int) -> CouponDiscountDTO:
        with self._uow as uow:
            coupon = uow.coupons.find_by_id(coupon_id)
        if coupon is None:
            raise CouponNotFoundError(f"Coupon #{coupon_id} not found")

        discounted = coupon.calculate_discount(Money.of(total_amount))
        return CouponDiscountDTO(discounted_amount=discounted.amount)
