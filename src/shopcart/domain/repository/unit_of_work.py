"""Abstract unit of work.

Groups the repositories that a write use case touches so their changes
commit together or not at all.  Leaving the ``with`` block without
calling ``commit()`` (or by raising) discards every change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.domain.repository.coupon_repository import CouponRepository
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    coupons: CouponRepository
    orders: OrderRepository
    cart_items: CartItemRepository

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Anything not committed by now is dropped.
        self.rollback()

    @abstractmethod
    def begin(self) -> None:
        """Load a fresh, isolated view of the stored state."""

    @abstractmethod
    def commit(self) -> None:
        """Make every change since ``begin()`` durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change."""
