"""Application service: Place Order use case.

Orchestrates the flow between repositories and the domain model.  Every
step (price check, coupon spend, order insert, cart cleanup) runs inside
a single unit of work: if any step fails, none of them is kept.
"""

from __future__ import annotations

import logging

from shopcart.application.dto import OrderDTO, OrderProductDTO, OrderRequest
from shopcart.domain.exceptions import CouponNotFoundError
from shopcart.domain.model.order import Order
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.pricing_verifier import PricingVerifier, VerifiedCart

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, request: OrderRequest, member_id: int) -> OrderDTO:
        """Place an order for *member_id*.

        Steps:
        1. Re-price the cart and reject a stale or tampered total.
        2. Spend the coupon, if one was given, and compute the discount.
        3. Persist the order with its price snapshot.
        4. Remove the purchased lines from the member's cart.
        """
        submitted_total = Money.of(request.total_amount)

        with self._uow as uow:
            cart = PricingVerifier(uow.products).verify(request.lines, submitted_total)
            discounted = self._apply_coupon(uow, request.coupon_id, member_id, submitted_total)

            order = Order.create(
                member_id=member_id,
                products=cart.products,
                total_amount=submitted_total,
                discounted_amount=discounted,
                delivery_amount=Money.of(request.delivery_amount),
                address=request.address,
            )
            order = uow.orders.save(order)

            for line in request.lines:
                uow.cart_items.delete(member_id, line.product_id)

            uow.commit()

        logger.info(
            "Order #%s placed by member %s: total=%s discounted=%s",
            order.id,
            member_id,
            order.total_amount,
            order.discounted_amount,
        )
        return self._to_dto(order, cart)

    @staticmethod
    def _apply_coupon(
        uow: UnitOfWork,
        coupon_id: int | None,
        member_id: int,
        total: Money,
    ) -> Money:
        if coupon_id is None:
            return total

        coupon = uow.coupons.find_by_id_and_member(coupon_id, member_id)
        if coupon is None:
            raise CouponNotFoundError(f"Coupon #{coupon_id} not found")

        used = coupon.use()
        discounted = coupon.calculate_discount(total)
        uow.coupons.update(used, member_id)
        logger.info("Coupon #%s used by member %s", coupon_id, member_id)
        return discounted

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order, cart: VerifiedCart) -> OrderDTO:
        # Pair by product ID so repeated lines for one product add up.
        quantities: dict[int | None, int] = {}
        for line in cart.lines:
            quantities[line.product.id] = (
                quantities.get(line.product.id, 0) + line.quantity.value
            )

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            total_amount=order.total_amount.amount,
            discounted_amount=order.discounted_amount.amount,
            delivery_amount=order.delivery_amount.amount,
            address=order.address,
            products=[
                OrderProductDTO(
                    id=product.id,  # type: ignore[arg-type]
                    name=product.name,
                    price=product.price.amount,
                    image_url=product.image_url,
                    quantity=quantities[product.id],
                )
                for product in order.distinct_products
            ],
        )
