"""Tests for the JSON-file-backed unit of work and repositories."""

import json

import pytest

from shopcart.application.dto import OrderRequest
from shopcart.application.place_order import PlaceOrderHandler
from shopcart.application.show_order import ShowOrderHandler
from shopcart.domain.exceptions import PriceMismatchError
from shopcart.domain.model.cart_item import CartItem
from shopcart.domain.model.coupon import Coupon
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.service.pricing_verifier import CartLineSpec
from shopcart.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@pytest.fixture
def store(tmp_path):
    return tmp_path / "data" / "store.json"


@pytest.fixture
def seeded(store) -> JsonUnitOfWork:
    uow = JsonUnitOfWork(store)
    with uow:
        uow.products.save(Product(None, "A", Money.of(5_000), "a.png"))
        uow.products.save(Product(None, "B", Money.of(3_000), "b.png"))
        uow.coupons.save(Coupon(None, "welcome", Money.of(1_000), Money.of(10_000)), 1)
        uow.cart_items.save(CartItem(None, 1, 1, Quantity(2)))
        uow.cart_items.save(CartItem(None, 1, 2, Quantity(1)))
        uow.commit()
    return uow


def _request(total: int, coupon_id: int | None = None) -> OrderRequest:
    return OrderRequest(
        lines=[CartLineSpec(1, 2), CartLineSpec(2, 1)],
        total_amount=total,
        delivery_amount=3_000,
        address="1 Main St",
        coupon_id=coupon_id,
    )


class TestJsonUnitOfWork:

    def test_creates_empty_store(self, store):
        JsonUnitOfWork(store)
        raw = json.loads(store.read_text(encoding="utf-8"))
        assert raw["orders"] == []
        assert raw["products"] == []

    def test_uncommitted_changes_discarded(self, seeded, store):
        with seeded:
            seeded.products.save(Product(None, "C", Money.of(1_000)))

        with seeded:
            assert seeded.products.get_by_name("C") is None

    def test_committed_changes_visible_to_new_instance(self, seeded, store):
        uow = JsonUnitOfWork(store)
        with uow:
            assert [p.name for p in uow.products.list_all()] == ["A", "B"]
            assert uow.coupons.find_by_id_and_member(1, 1).name == "welcome"
            assert uow.coupons.find_by_id_and_member(1, 2) is None


class TestOrderPersistence:

    def test_place_order_writes_everything(self, seeded, store):
        dto = PlaceOrderHandler(seeded).handle(_request(13_000, coupon_id=1), member_id=1)

        raw = json.loads(store.read_text(encoding="utf-8"))
        assert raw["orders"][0]["total_amount"] == 13_000
        assert raw["orders"][0]["discounted_amount"] == 12_000
        assert [r["product_id"] for r in raw["order_products"]] == [1, 1, 2]
        assert raw["coupons"][0]["used"] is True
        assert raw["cart_items"] == []
        assert dto.id == 1

    def test_failed_order_leaves_store_untouched(self, seeded, store):
        before = store.read_text(encoding="utf-8")

        with pytest.raises(PriceMismatchError):
            PlaceOrderHandler(seeded).handle(_request(12_000, coupon_id=1), member_id=1)

        assert store.read_text(encoding="utf-8") == before

    def test_order_read_back_counts_rows(self, seeded):
        dto = PlaceOrderHandler(seeded).handle(_request(13_000), member_id=1)

        shown = ShowOrderHandler(seeded).handle(dto.id)
        assert [(p.id, p.quantity) for p in shown.products] == [(1, 2), (2, 1)]
        assert shown.products[0].image_url == "a.png"

    def test_order_keeps_price_after_catalog_change(self, seeded):
        dto = PlaceOrderHandler(seeded).handle(_request(13_000), member_id=1)

        with seeded:
            a = seeded.products.get_by_id(1)
            seeded.products.save(a.with_price(Money.of(7_000)))
            seeded.commit()

        shown = ShowOrderHandler(seeded).handle(dto.id)
        assert shown.total_amount == 13_000
        assert shown.products[0].price == 5_000
