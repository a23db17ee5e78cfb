"""Application service: cart maintenance use cases."""

from __future__ import annotations

from shopcart.application.dto import CartItemDTO
from shopcart.domain.exceptions import ProductNotFoundError
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.value_objects import Quantity
from shopcart.domain.repository.unit_of_work import UnitOfWork


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, product_id: int, quantity: int) -> CartItem:
        """Put a product in the member's cart, or bump its quantity."""
        qty = Quantity(quantity)

        with self._uow as uow:
            if uow.products.get_by_id(product_id) is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")

            for existing in uow.cart_items.list_by_member(member_id):
                if existing.product_id == product_id:
                    item = uow.cart_items.save(existing.add(qty))
                    break
            else:
                item = uow.cart_items.save(
                    CartItem(id=None, member_id=member_id, product_id=product_id, quantity=qty)
                )
            uow.commit()
        return item


class ListCartItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> list[CartItemDTO]:
        with self._uow as uow:
            result: list[CartItemDTO] = []
            for item in uow.cart_items.list_by_member(member_id):
                product = uow.products.get_by_id(item.product_id)
                if product is None:
                    raise ProductNotFoundError(f"Product #{item.product_id} not found")
                result.append(
                    CartItemDTO(
                        id=item.id,  # type: ignore[arg-type]
                        product_id=item.product_id,
                        product_name=product.name,
                        price=product.price.amount,
                        quantity=item.quantity.value,
                    )
                )
            return result
