"""Application service: Issue Coupon use case."""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.coupon import Coupon
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class IssueCouponHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        member_id: int,
        name: str,
        discount_amount: int,
        min_amount: int,
    ) -> Coupon:
        """Give a new, unused coupon to a member."""
        if not name or not name.strip():
            raise ValidationError("Coupon name is required")

        discount = Money.of(discount_amount)
        if discount.amount <= 0:
            raise ValidationError("Coupon discount must be greater than zero")

        coupon = Coupon(
            id=None,
            name=name.strip(),
            discount_amount=discount,
            min_amount=Money.of(min_amount),
        )

        with self._uow as uow:
            coupon = uow.coupons.save(coupon, member_id)
            uow.commit()

        logger.info("Coupon #%s issued to member %s", coupon.id, member_id)
        return coupon
