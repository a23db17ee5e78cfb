"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new order, assigning its ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_member(self, member_id: int) -> list[Order]:
        """Return the member's orders in storage order."""

    @abstractmethod
    def count_products(self, product_id: int, order_id: int) -> int:
        """Count the stored order-line rows for a product in an order."""
