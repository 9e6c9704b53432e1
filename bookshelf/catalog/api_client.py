"""
HTTP client for the bookshelf REST API.

``BooksClient`` wraps the four endpoints (list, create, update,
delete) and converts every failure, whether a non-2xx status or a
transport error, into a ``BooksApiError`` whose message is suitable
for showing to the user as-is.  The underlying ``requests.Session``
can be swapped for any object with the same ``request`` method (for
instance FastAPI's ``TestClient``).
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from ..config import settings
from ..models import Book


logger = logging.getLogger(__name__)


class BooksApiError(Exception):
    """Raised when a request to the bookshelf API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BooksClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.api_base).rstrip("/")
        # Only a session this client created is closed by ``close()``.
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.api_timeout

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "BooksClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _request(self, method: str, path: str, error_message: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body.

        Raises ``BooksApiError`` carrying ``error_message`` on any
        failure, including a successful response whose body is not
        JSON.  The HTTP status is attached when the server answered.
        """
        url = f"{self.base_url}{path}"
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise BooksApiError(error_message) from exc

        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned status %s", method, url, response.status_code)
            raise BooksApiError(error_message, status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s %s returned a body that is not JSON", method, url)
            raise BooksApiError(error_message, status_code=response.status_code) from exc

    def list_books(self) -> List[Book]:
        data = self._request("GET", "/books", "Failed to fetch books")
        return [Book(**item) for item in data]

    def create_book(self, title: str, author: str) -> Book:
        data = self._request(
            "POST", "/books", "Failed to create book", json={"title": title, "author": author}
        )
        return Book(**data)

    def update_book(self, book_id: int, title: str, author: str) -> Book:
        data = self._request(
            "PUT",
            f"/books/{book_id}",
            "Failed to update book",
            json={"title": title, "author": author},
        )
        return Book(**data)

    def delete_book(self, book_id: int) -> str:
        data = self._request("DELETE", f"/books/{book_id}", "Failed to delete")
        return data.get("message", "")
