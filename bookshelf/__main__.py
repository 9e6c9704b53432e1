"""Run the bookshelf API with uvicorn.

Usage:
    python -m bookshelf

Host and port come from the ``HOST`` and ``PORT`` environment
variables (see ``bookshelf.config``).
"""
import logging

import uvicorn

from .config import settings
from .main import app


def main() -> None:
    logging.getLogger(__name__).info(
        "Server running on http://%s:%s", settings.host, settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
