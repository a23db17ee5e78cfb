"""Application settings.

Loaded from ``SHOPCART_*`` environment variables (or a ``.env`` file)
and validated on load, so a bad value fails before any command runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(env_prefix="SHOPCART_", env_file=".env", extra="ignore")

    # Directory holding store.json; the repo's data/ folder when unset
    data_dir: Path | None = None

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    return Settings()
