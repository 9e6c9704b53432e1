"""
Configuration for the bookshelf service and its Python client.

Values are read from environment variables when this module is
imported.  A ``.env`` file in the working directory is loaded first
(if present) so local overrides do not need to be exported by hand.
Defaults mirror the demo setup: the API listens on port 3000 and the
client expects it at ``http://localhost:3000``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: Optional[str], default: str = "*") -> List[str]:
    return [item.strip() for item in (val or default).split(",") if item.strip()]


def _as_timeout(val: Optional[str]) -> Optional[float]:
    # Empty means "no timeout", which is what a browser fetch does by default.
    return float(val) if val else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bookshelf API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))

    # When false the service starts with an empty collection instead of
    # the two sample books.
    seed_books: bool = _as_bool(os.getenv("SEED_BOOKS"), True)

    # Comma-separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: List[str] = field(default_factory=lambda: _as_list(os.getenv("CORS_ORIGINS")))

    # Used by ``bookshelf.catalog`` when no explicit base URL is given.
    api_base: str = os.getenv("BOOKS_API_BASE", "http://localhost:3000")
    api_timeout: Optional[float] = _as_timeout(os.getenv("BOOKS_API_TIMEOUT"))


settings = Settings()
