"""Abstract repository for cart items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart_item import CartItem


class CartItemRepository(ABC):

    @abstractmethod
    def list_by_member(self, member_id: int) -> list[CartItem]:
        """Return every item in the member's cart."""

    @abstractmethod
    def save(self, item: CartItem) -> CartItem:
        """Persist a new or updated cart item."""

    @abstractmethod
    def delete(self, member_id: int, product_id: int) -> None:
        """Remove the member's cart entry for a product, if any."""
