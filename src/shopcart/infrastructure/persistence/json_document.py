"""Single JSON document holding every table.

All repositories of one unit of work share one loaded document, so a
commit writes every table in a single file replace.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

TABLES = ("products", "coupons", "orders", "order_products", "cart_items")


def empty_document() -> dict[str, list[dict]]:
    return {table: [] for table in TABLES}


def load_document(file_path: Path) -> dict[str, list[dict]]:
    raw = json.loads(file_path.read_text(encoding="utf-8"))
    document = empty_document()
    document.update({table: raw.get(table, []) for table in TABLES})
    return document


def write_document(file_path: Path, document: dict[str, list[dict]]) -> None:
    """Write the document via a temp file so readers never see half of it."""
    tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    os.replace(tmp_path, file_path)


def next_id(records: list[dict]) -> int:
    if not records:
        return 1
    return max(r["id"] for r in records) + 1
