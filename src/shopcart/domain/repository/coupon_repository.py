"""Abstract repository for coupons.

Coupons are keyed by (coupon ID, owning member ID); a lookup with the
wrong member behaves exactly like a lookup of a missing coupon.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.coupon import Coupon


class CouponRepository(ABC):

    @abstractmethod
    def find_by_id_and_member(self, coupon_id: int, member_id: int) -> Coupon | None:
        """Return the member's coupon, or None."""

    @abstractmethod
    def find_unused_by_member(self, member_id: int) -> list[Coupon]:
        """Return the member's coupons that have not been used yet."""

    @abstractmethod
    def find_by_id(self, coupon_id: int) -> Coupon | None:
        """Return a coupon regardless of its owner, or None."""

    @abstractmethod
    def find_all(self) -> list[Coupon]:
        """Return every coupon."""

    @abstractmethod
    def save(self, coupon: Coupon, member_id: int) -> Coupon:
        """Issue a new coupon to a member, assigning its ID."""

    @abstractmethod
    def update(self, coupon: Coupon, member_id: int) -> None:
        """Persist a new state of an existing coupon."""
