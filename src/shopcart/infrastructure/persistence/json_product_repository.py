"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from dataclasses import replace

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.persistence.json_document import next_id


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._records:
            if raw["name"].lower() == name.strip().lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, product: Product) -> Product:
        if product.id is None:
            product = replace(product, id=next_id(self._records))

        for i, raw in enumerate(self._records):
            if raw["id"] == product.id:
                self._records[i] = self._to_raw(product)
                break
        else:
            self._records.append(self._to_raw(product))
        return product

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.amount,
            "image_url": product.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(raw["price"]),
            image_url=raw.get("image_url", ""),
        )
