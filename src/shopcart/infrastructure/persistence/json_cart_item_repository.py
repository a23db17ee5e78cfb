"""JSON-document-backed implementation of CartItemRepository."""

from __future__ import annotations

from dataclasses import replace

from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.value_objects import Quantity
from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.infrastructure.persistence.json_document import next_id


class JsonCartItemRepository(CartItemRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- CartItemRepository interface -----------------------------------------

    def list_by_member(self, member_id: int) -> list[CartItem]:
        return [
            self._to_domain(raw)
            for raw in self._records
            if raw["member_id"] == member_id
        ]

    def save(self, item: CartItem) -> CartItem:
        if item.id is None:
            item = replace(item, id=next_id(self._records))

        for i, raw in enumerate(self._records):
            if raw["id"] == item.id:
                self._records[i] = self._to_raw(item)
                break
        else:
            self._records.append(self._to_raw(item))
        return item

    def delete(self, member_id: int, product_id: int) -> None:
        self._records[:] = [
            raw
            for raw in self._records
            if not (raw["member_id"] == member_id and raw["product_id"] == product_id)
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "id": item.id,
            "member_id": item.member_id,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartItem:
        return CartItem(
            id=raw["id"],
            member_id=raw["member_id"],
            product_id=raw["product_id"],
            quantity=Quantity(raw["quantity"]),
        )
