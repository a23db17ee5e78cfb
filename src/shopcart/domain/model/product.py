"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen so that an order can hold the very same object as its price
    snapshot: a price change produces a new Product and leaves every
    order that captured the old one untouched.
    """

    id: int | None
    name: str
    price: Money
    image_url: str = ""

    def with_price(self, new_price: Money) -> Product:
        """Return a copy of this product at *new_price*."""
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        return replace(self, price=new_price)
