"""JSON-file-backed implementation of UnitOfWork.

``begin()`` loads the whole document into memory and hands each
repository its tables.  Repositories only ever touch that in-memory
copy; ``commit()`` writes it back in one atomic file replace, and
``rollback()`` throws it away.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.infrastructure.persistence.json_cart_item_repository import (
    JsonCartItemRepository,
)
from shopcart.infrastructure.persistence.json_coupon_repository import (
    JsonCouponRepository,
)
from shopcart.infrastructure.persistence.json_document import (
    empty_document,
    load_document,
    write_document,
)
from shopcart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._document: dict[str, list[dict]] = empty_document()
        self._ensure_file()

    # --- UnitOfWork interface -------------------------------------------------

    def begin(self) -> None:
        self._document = load_document(self._file_path)
        self.products = JsonProductRepository(self._document["products"])
        self.coupons = JsonCouponRepository(self._document["coupons"])
        self.orders = JsonOrderRepository(
            self._document["orders"], self._document["order_products"]
        )
        self.cart_items = JsonCartItemRepository(self._document["cart_items"])

    def commit(self) -> None:
        write_document(self._file_path, self._document)
        logger.debug("Committed changes to %s", self._file_path)

    def rollback(self) -> None:
        self._document = empty_document()

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            write_document(self._file_path, empty_document())
