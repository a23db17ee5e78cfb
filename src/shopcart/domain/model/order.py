"""Order aggregate — the core of the domain.

The Order owns its expanded product list: a product bought three times
appears three times.  Every product is a price snapshot, so the amounts
recorded here never move after the order is placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    member_id: int
    products: list[Product]
    total_amount: Money
    discounted_amount: Money
    delivery_amount: Money
    address: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        member_id: int,
        products: list[Product],
        total_amount: Money,
        discounted_amount: Money,
        delivery_amount: Money,
        address: str,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not products:
            raise ValidationError("Order must contain at least one product")

        if not address or not address.strip():
            raise ValidationError("Delivery address is required")

        priced = Money.sum(p.price for p in products)
        if priced != total_amount:
            raise ValidationError(
                f"Order total {total_amount} does not match product prices {priced}"
            )

        if discounted_amount > total_amount:
            raise ValidationError(
                f"Discounted amount {discounted_amount} exceeds total {total_amount}"
            )

        return Order(
            id=None,
            member_id=member_id,
            products=list(products),
            total_amount=total_amount,
            discounted_amount=discounted_amount,
            delivery_amount=delivery_amount,
            address=address.strip(),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def distinct_products(self) -> list[Product]:
        """Products without repeats, in the order they were purchased."""
        seen: dict[int | None, Product] = {}
        for product in self.products:
            seen.setdefault(product.id, product)
        return list(seen.values())
