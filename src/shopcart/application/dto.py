"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are plain ints
(minor units) on the way in and on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopcart.domain.service.pricing_verifier import CartLineSpec


@dataclass(frozen=True)
class OrderRequest:
    """Input: a checkout as submitted by the client."""

    lines: list[CartLineSpec]
    total_amount: int
    delivery_amount: int
    address: str
    coupon_id: int | None = None


@dataclass(frozen=True)
class OrderProductDTO:
    """Output: one distinct product of an order and how many were bought."""

    id: int
    name: str
    price: int
    image_url: str
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    total_amount: int
    discounted_amount: int
    delivery_amount: int
    address: str
    products: list[OrderProductDTO] = field(default_factory=list)


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one entry of a member's order history."""

    id: int
    products: list[OrderProductDTO]


@dataclass(frozen=True)
class CouponDTO:
    id: int
    name: str
    min_amount: int
    discount_amount: int
    used: bool


@dataclass(frozen=True)
class UsableCouponDTO:
    id: int
    name: str
    min_amount: int


@dataclass(frozen=True)
class CouponDiscountDTO:
    discounted_amount: int


@dataclass(frozen=True)
class CartItemDTO:
    id: int
    product_id: int
    product_name: str
    price: int
    quantity: int
