"""Domain service: Pricing Verifier.

Recomputes the cart total from current catalog prices and compares it
with the total the client submitted.  A client holding a stale cart, or
one that edited the total, is stopped here before anything is written.

Like the other domain services, it validates everything first and
returns a plain result; persisting is left to the application layer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from shopcart.domain.exceptions import PriceMismatchError, ProductNotFoundError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLineSpec:
    """Input: one cart line the member wants to buy."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class PricedLine:
    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class VerifiedCart:
    """Output: the priced lines, their expansion and the verified total."""

    lines: list[PricedLine]
    total: Money

    @property
    def products(self) -> list[Product]:
        """One product entry per unit bought, in request order."""
        expanded: list[Product] = []
        for line in self.lines:
            expanded.extend([line.product] * line.quantity.value)
        return expanded


class PricingVerifier:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def verify(self, lines: Sequence[CartLineSpec], submitted_total: Money) -> VerifiedCart:
        """Price every line and check the sum against *submitted_total*."""
        priced: list[PricedLine] = []
        for spec in lines:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise ProductNotFoundError(f"Product #{spec.product_id} not found")
            priced.append(PricedLine(product=product, quantity=Quantity(spec.quantity)))

        total = Money.sum(line.line_total for line in priced)
        if total != submitted_total:
            logger.warning(
                "Submitted total %s does not match current prices %s",
                submitted_total,
                total,
            )
            raise PriceMismatchError(
                f"Product prices have changed: expected {total}, got {submitted_total}"
            )

        return VerifiedCart(lines=priced, total=total)
