"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shopcart.infrastructure.config import get_settings
from shopcart.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_file() -> Path:
    data_dir = get_settings().data_dir or _DEFAULT_DATA_DIR
    return data_dir / "store.json"


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(data_file())


def configure_logging(verbose: bool = False) -> None:
    level = get_settings().log_level
    logging.basicConfig(
        level="DEBUG" if verbose else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
