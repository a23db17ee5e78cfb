"""Application service: Update Product use case."""

from __future__ import annotations

from shopcart.domain.exceptions import ProductNotFoundError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, new_price: int) -> Product:
        """Update a product's price.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")

            product = uow.products.save(product.with_price(Money.of(new_price)))
            uow.commit()
        return product
