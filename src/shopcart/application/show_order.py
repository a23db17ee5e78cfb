"""Application service: Show Order use cases (queries).

Quantities are re-read from the stored order lines rather than derived
from the in-memory product list.
"""

from __future__ import annotations

from shopcart.application.dto import OrderDTO, OrderProductDTO, OrderSummaryDTO
from shopcart.domain.exceptions import OrderNotFoundError
from shopcart.domain.model.order import Order
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")
            return OrderDTO(
                id=order.id,  # type: ignore[arg-type]
                total_amount=order.total_amount.amount,
                discounted_amount=order.discounted_amount.amount,
                delivery_amount=order.delivery_amount.amount,
                address=order.address,
                products=_product_dtos(uow.orders, order),
            )


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> list[OrderSummaryDTO]:
        with self._uow as uow:
            return [
                OrderSummaryDTO(
                    id=order.id,  # type: ignore[arg-type]
                    products=_product_dtos(uow.orders, order),
                )
                for order in uow.orders.find_by_member(member_id)
            ]


def _product_dtos(orders: OrderRepository, order: Order) -> list[OrderProductDTO]:
    return [
        OrderProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=product.price.amount,
            image_url=product.image_url,
            quantity=orders.count_products(product.id, order.id),  # type: ignore[arg-type]
        )
        for product in order.distinct_products
    ]
