import sys
from pathlib import Path

import pytest

# Make the project root importable for direct pytest runs without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bookshelf import storage  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_books():
    storage.reset_books(seed=True)
    yield storage.BOOKS
    storage.reset_books(seed=True)
