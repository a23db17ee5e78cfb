"""JSON-document-backed implementation of OrderRepository.

An order is stored as one ``orders`` row plus one ``order_products`` row
per unit bought, each row holding the product snapshot taken at
purchase time.
"""

from __future__ import annotations

from datetime import datetime

from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.infrastructure.persistence.json_document import next_id


class JsonOrderRepository(OrderRepository):

    def __init__(self, orders: list[dict], order_products: list[dict]) -> None:
        self._orders = orders
        self._order_products = order_products

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order) -> Order:
        if order.id is None:
            order.id = next_id(self._orders)

        self._orders[:] = [raw for raw in self._orders if raw["id"] != order.id]
        self._order_products[:] = [
            raw for raw in self._order_products if raw["order_id"] != order.id
        ]
        self._orders.append(self._to_raw(order))
        self._order_products.extend(
            self._product_to_raw(order.id, product) for product in order.products
        )
        return order

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._orders:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_by_member(self, member_id: int) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._orders
            if raw["member_id"] == member_id
        ]

    def count_products(self, product_id: int, order_id: int) -> int:
        return sum(
            1
            for raw in self._order_products
            if raw["order_id"] == order_id and raw["product_id"] == product_id
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "member_id": order.member_id,
            "total_amount": order.total_amount.amount,
            "discounted_amount": order.discounted_amount.amount,
            "delivery_amount": order.delivery_amount.amount,
            "address": order.address,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _product_to_raw(order_id: int, product: Product) -> dict:
        return {
            "order_id": order_id,
            "product_id": product.id,
            "name": product.name,
            "price": product.price.amount,
            "image_url": product.image_url,
        }

    def _to_domain(self, raw: dict) -> Order:
        products = [
            Product(
                id=p["product_id"],
                name=p["name"],
                price=Money(p["price"]),
                image_url=p.get("image_url", ""),
            )
            for p in self._order_products
            if p["order_id"] == raw["id"]
        ]
        return Order(
            id=raw["id"],
            member_id=raw["member_id"],
            products=products,
            total_amount=Money(raw["total_amount"]),
            discounted_amount=Money(raw["discounted_amount"]),
            delivery_amount=Money(raw["delivery_amount"]),
            address=raw["address"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
