"""Integration tests for the PlaceOrder use case.

Uses in-memory fakes — no file I/O.
"""

import pytest

from shopcart.application.dto import OrderRequest
from shopcart.application.place_order import PlaceOrderHandler
from shopcart.domain.exceptions import (
    BelowMinimumError,
    CouponAlreadyUsedError,
    CouponNotFoundError,
    PriceMismatchError,
    ProductNotFoundError,
)
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.coupon import Coupon
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.service.pricing_verifier import CartLineSpec
from tests.fakes import (
    FakeCartItemRepository,
    FakeCouponRepository,
    FakeProductRepository,
    FakeUnitOfWork,
)

MEMBER = 1
OTHER_MEMBER = 2


def _setup() -> tuple[PlaceOrderHandler, FakeUnitOfWork]:
    """Build handler with two products, a coupon for MEMBER and a full cart."""
    uow = FakeUnitOfWork(
        products=FakeProductRepository([
            Product(id=1, name="A", price=Money.of(5_000), image_url="a.png"),
            Product(id=2, name="B", price=Money.of(3_000), image_url="b.png"),
        ]),
        coupons=FakeCouponRepository([
            (MEMBER, Coupon(1, "welcome", Money.of(1_000), Money.of(10_000))),
            (OTHER_MEMBER, Coupon(2, "theirs", Money.of(1_000), Money.of(10_000))),
            (MEMBER, Coupon(3, "big", Money.of(2_000), Money.of(20_000))),
        ]),
        cart_items=FakeCartItemRepository([
            CartItem(1, MEMBER, 1, Quantity(2)),
            CartItem(2, MEMBER, 2, Quantity(1)),
            CartItem(3, OTHER_MEMBER, 1, Quantity(1)),
        ]),
    )
    return PlaceOrderHandler(uow), uow


def _request(total: int = 13_000, coupon_id: int | None = None) -> OrderRequest:
    return OrderRequest(
        lines=[CartLineSpec(1, 2), CartLineSpec(2, 1)],
        total_amount=total,
        delivery_amount=3_000,
        address="1 Main St",
        coupon_id=coupon_id,
    )


def _assert_nothing_written(uow: FakeUnitOfWork) -> None:
    assert uow.commits == 0
    assert uow.orders.find_by_member(MEMBER) == []
    assert uow.coupons.updates == []
    assert uow.cart_items.deleted == []
    assert len(uow.cart_items.list_by_member(MEMBER)) == 2
    assert uow.coupons.find_by_id(1).used is False


class TestPlaceOrderHappyPath:

    def test_order_persisted_with_verified_total(self):
        handler, uow = _setup()
        dto = handler.handle(_request(), member_id=MEMBER)

        saved = uow.orders.get_by_id(dto.id)
        assert saved.total_amount == Money.of(13_000)
        assert saved.discounted_amount == Money.of(13_000)
        assert saved.delivery_amount == Money.of(3_000)
        assert saved.member_id == MEMBER
        assert [p.id for p in saved.products] == [1, 1, 2]
        assert uow.commits == 1

    def test_response_pairs_products_with_quantities(self):
        handler, _ = _setup()
        dto = handler.handle(_request(), member_id=MEMBER)

        assert dto.total_amount == 13_000
        assert dto.address == "1 Main St"
        assert [(p.id, p.quantity) for p in dto.products] == [(1, 2), (2, 1)]
        assert dto.products[0].image_url == "a.png"
        assert dto.products[0].price == 5_000

    def test_quantities_paired_by_product_id_not_position(self):
        handler, _ = _setup()
        request = OrderRequest(
            lines=[CartLineSpec(1, 1), CartLineSpec(2, 1), CartLineSpec(1, 2)],
            total_amount=18_000,
            delivery_amount=0,
            address="1 Main St",
        )
        dto = handler.handle(request, member_id=MEMBER)
        assert [(p.id, p.quantity) for p in dto.products] == [(1, 3), (2, 1)]

    def test_cart_lines_removed(self):
        handler, uow = _setup()
        handler.handle(_request(), member_id=MEMBER)

        assert uow.cart_items.deleted == [(MEMBER, 1), (MEMBER, 2)]
        assert uow.cart_items.list_by_member(MEMBER) == []
        assert len(uow.cart_items.list_by_member(OTHER_MEMBER)) == 1

    def test_sequential_ids(self):
        handler, _ = _setup()
        dto1 = handler.handle(_request(), member_id=MEMBER)
        dto2 = handler.handle(_request(), member_id=MEMBER)
        assert dto2.id == dto1.id + 1


class TestPlaceOrderWithCoupon:

    def test_discount_applied(self):
        handler, uow = _setup()
        dto = handler.handle(_request(coupon_id=1), member_id=MEMBER)

        assert dto.total_amount == 13_000
        assert dto.discounted_amount == 12_000
        assert uow.orders.get_by_id(dto.id).discounted_amount == Money.of(12_000)

    def test_coupon_marked_used(self):
        handler, uow = _setup()
        handler.handle(_request(coupon_id=1), member_id=MEMBER)

        assert uow.coupons.find_by_id(1).used is True
        assert uow.coupons.updates == [(uow.coupons.find_by_id(1), MEMBER)]

    def test_coupon_cannot_be_used_twice(self):
        handler, uow = _setup()
        handler.handle(_request(coupon_id=1), member_id=MEMBER)

        with pytest.raises(CouponAlreadyUsedError):
            handler.handle(_request(coupon_id=1), member_id=MEMBER)
        assert len(uow.orders.find_by_member(MEMBER)) == 1

    def test_coupon_of_other_member_not_found(self):
        handler, uow = _setup()
        with pytest.raises(CouponNotFoundError, match="#2"):
            handler.handle(_request(coupon_id=2), member_id=MEMBER)
        _assert_nothing_written(uow)

    def test_unknown_coupon_not_found(self):
        handler, uow = _setup()
        with pytest.raises(CouponNotFoundError):
            handler.handle(_request(coupon_id=42), member_id=MEMBER)
        _assert_nothing_written(uow)

    def test_total_below_coupon_minimum_rolls_back(self):
        handler, uow = _setup()
        with pytest.raises(BelowMinimumError):
            handler.handle(_request(coupon_id=3), member_id=MEMBER)
        _assert_nothing_written(uow)
        assert uow.coupons.find_by_id(3).used is False


class TestPlaceOrderRejections:

    def test_price_mismatch_rejected_without_side_effects(self):
        handler, uow = _setup()
        with pytest.raises(PriceMismatchError):
            handler.handle(_request(total=12_000, coupon_id=1), member_id=MEMBER)
        _assert_nothing_written(uow)

    def test_price_change_after_cart_filled_rejected(self):
        handler, uow = _setup()
        a = uow.products.get_by_id(1)
        uow.products.save(a.with_price(Money.of(5_500)))

        with pytest.raises(PriceMismatchError):
            handler.handle(_request(), member_id=MEMBER)

    def test_unknown_product_rejected(self):
        handler, uow = _setup()
        request = OrderRequest(
            lines=[CartLineSpec(99, 1)],
            total_amount=1_000,
            delivery_amount=0,
            address="1 Main St",
        )
        with pytest.raises(ProductNotFoundError):
            handler.handle(request, member_id=MEMBER)
        _assert_nothing_written(uow)
