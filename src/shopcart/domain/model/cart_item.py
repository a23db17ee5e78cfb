"""Cart item record.

Order placement never edits cart items; it only removes the ones the
order consumed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartItem:
    """A product waiting in a member's cart."""

    id: int | None
    member_id: int
    product_id: int
    quantity: Quantity

    def add(self, quantity: Quantity) -> CartItem:
        """Return this item with *quantity* more units."""
        return replace(self, quantity=Quantity(self.quantity.value + quantity.value))
