"""Application service: Add Product use case."""

from __future__ import annotations

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: int, image_url: str = "") -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        money = Money.of(price)
        if money.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        with self._uow as uow:
            if uow.products.get_by_name(name) is not None:
                raise ValidationError(f"Product '{name}' already exists")

            product = uow.products.save(
                Product(id=None, name=name.strip(), price=money, image_url=image_url)
            )
            uow.commit()
        return product
