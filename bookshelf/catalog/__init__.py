"""
Client package for the bookshelf API.

``BooksClient`` talks HTTP to the four catalog endpoints, and
``CatalogView`` holds a local mirror of the collection together with
the search, sort, pagination, form and notification state a frontend
renders from.  The vanilla page under ``bookshelf/static`` implements
the same flows in the browser.
"""

from .api_client import BooksApiError, BooksClient  # noqa: F401
from .view import CatalogView, filter_books, sort_books  # noqa: F401
