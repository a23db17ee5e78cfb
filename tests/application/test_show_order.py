"""Tests for the order query use cases."""

import pytest

from shopcart.application.dto import OrderRequest
from shopcart.application.place_order import PlaceOrderHandler
from shopcart.application.show_order import ListOrdersHandler, ShowOrderHandler
from shopcart.domain.exceptions import OrderNotFoundError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.service.pricing_verifier import CartLineSpec
from tests.fakes import FakeProductRepository, FakeUnitOfWork


def _uow() -> FakeUnitOfWork:
    return FakeUnitOfWork(
        products=FakeProductRepository([
            Product(id=1, name="A", price=Money.of(5_000)),
            Product(id=2, name="B", price=Money.of(3_000)),
        ]),
    )


def _place(uow: FakeUnitOfWork, member_id: int, lines: list[CartLineSpec], total: int) -> int:
    request = OrderRequest(lines=lines, total_amount=total, delivery_amount=2_500, address="home")
    return PlaceOrderHandler(uow).handle(request, member_id=member_id).id


class TestShowOrder:

    def test_returns_stored_amounts_and_counted_quantities(self):
        uow = _uow()
        order_id = _place(uow, 1, [CartLineSpec(1, 2), CartLineSpec(2, 1)], 13_000)

        dto = ShowOrderHandler(uow).handle(order_id)

        assert dto.id == order_id
        assert dto.total_amount == 13_000
        assert dto.discounted_amount == 13_000
        assert dto.delivery_amount == 2_500
        assert dto.address == "home"
        assert [(p.id, p.quantity) for p in dto.products] == [(1, 2), (2, 1)]

    def test_unaffected_by_later_price_change(self):
        uow = _uow()
        order_id = _place(uow, 1, [CartLineSpec(1, 2)], 10_000)

        a = uow.products.get_by_id(1)
        uow.products.save(a.with_price(Money.of(9_999)))

        dto = ShowOrderHandler(uow).handle(order_id)
        assert dto.total_amount == 10_000
        assert dto.products[0].price == 5_000

    def test_missing_order_rejected(self):
        with pytest.raises(OrderNotFoundError, match="#7"):
            ShowOrderHandler(_uow()).handle(7)


class TestListOrders:

    def test_lists_only_member_orders_in_storage_order(self):
        uow = _uow()
        first = _place(uow, 1, [CartLineSpec(1, 1)], 5_000)
        _place(uow, 2, [CartLineSpec(2, 1)], 3_000)
        third = _place(uow, 1, [CartLineSpec(2, 3)], 9_000)

        summaries = ListOrdersHandler(uow).handle(1)

        assert [s.id for s in summaries] == [first, third]
        assert [(p.id, p.quantity) for p in summaries[1].products] == [(2, 3)]

    def test_no_orders(self):
        assert ListOrdersHandler(_uow()).handle(1) == []
