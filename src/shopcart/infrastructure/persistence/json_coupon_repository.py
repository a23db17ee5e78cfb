"""JSON-document-backed implementation of CouponRepository."""

from __future__ import annotations

from dataclasses import replace

from shopcart.domain.exceptions import CouponNotFoundError
from shopcart.domain.model.coupon import Coupon
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.coupon_repository import CouponRepository
from shopcart.infrastructure.persistence.json_document import next_id


class JsonCouponRepository(CouponRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- CouponRepository interface -------------------------------------------

    def find_by_id_and_member(self, coupon_id: int, member_id: int) -> Coupon | None:
        for raw in self._records:
            if raw["id"] == coupon_id and raw["member_id"] == member_id:
                return self._to_domain(raw)
        return None

    def find_unused_by_member(self, member_id: int) -> list[Coupon]:
        return [
            self._to_domain(raw)
            for raw in self._records
            if raw["member_id"] == member_id and not raw["used"]
        ]

    def find_by_id(self, coupon_id: int) -> Coupon | None:
        for raw in self._records:
            if raw["id"] == coupon_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Coupon]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, coupon: Coupon, member_id: int) -> Coupon:
        coupon = replace(coupon, id=next_id(self._records))
        self._records.append(self._to_raw(coupon, member_id))
        return coupon

    def update(self, coupon: Coupon, member_id: int) -> None:
        for i, raw in enumerate(self._records):
            if raw["id"] == coupon.id and raw["member_id"] == member_id:
                self._records[i] = self._to_raw(coupon, member_id)
                return
        raise CouponNotFoundError(f"Coupon #{coupon.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(coupon: Coupon, member_id: int) -> dict:
        return {
            "id": coupon.id,
            "member_id": member_id,
            "name": coupon.name,
            "discount_amount": coupon.discount_amount.amount,
            "min_amount": coupon.min_amount.amount,
            "used": coupon.used,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Coupon:
        return Coupon(
            id=raw["id"],
            name=raw["name"],
            discount_amount=Money(raw["discount_amount"]),
            min_amount=Money(raw["min_amount"]),
            used=raw["used"],
        )
