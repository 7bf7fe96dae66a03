"""Environment configuration for the Recipe Normalizer command line."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .const import DEFAULT_LOG_LEVEL, ENV_CATALOG_PATH, ENV_LOG_LEVEL


class Settings(BaseModel):
    """Settings read from the environment (and a .env file, if present)."""

    catalog_path: str | None = Field(
        default=None,
        description="Path to a JSON tag catalog; the built-in catalog is used if unset",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Logging level name, e.g. 'DEBUG'",
    )


def load_settings() -> Settings:
    """Load settings, reading a .env file without overriding the environment."""
    load_dotenv()
    return Settings(
        catalog_path=os.getenv(ENV_CATALOG_PATH) or None,
        log_level=(os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return load_settings()
