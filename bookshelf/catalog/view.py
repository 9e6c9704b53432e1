"""
Client-side state for browsing and editing the book catalog.

``CatalogView`` keeps a local mirror of the server collection along
with the ephemeral UI state a frontend needs: the search query, the
sort key, the current page, the add/edit form and its modal, the book
pending deletion, and a short-lived notification.

The mirror is fetched once by ``load()``.  Searching, sorting and
pagination are computed from the mirror only; nothing is sent to the
server for them.  Mutations go to the server first and the mirror is
patched from the server's response afterwards, so a failed request
leaves the mirror untouched and only produces an error notification.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional

from ..models import Book
from .api_client import BooksApiError, BooksClient
from .schemas import FormDraft, Notification, NotificationKind, Page, SortKey


logger = logging.getLogger(__name__)

PAGE_SIZE = 8
NOTIFICATION_SECONDS = 3.0
DEFAULT_SORT: SortKey = "id-desc"
SORT_KEYS = ("id-desc", "id-asc", "title-asc", "title-desc", "author-asc", "author-desc")

MIN_TITLE_LENGTH = 2
MIN_AUTHOR_LENGTH = 3


def _norm(s: Optional[str]) -> str:
    """Lowercase and strip a string for case-insensitive comparison."""
    return (s or "").strip().lower()


def filter_books(books: List[Book], query: str) -> List[Book]:
    """Return the books whose title or author contains ``query``.

    Matching is case-insensitive and ignores surrounding whitespace in
    the query.  An empty query returns a copy of ``books``.
    """
    nq = _norm(query)
    if not nq:
        return list(books)
    return [b for b in books if nq in b.title.lower() or nq in b.author.lower()]


def sort_books(books: List[Book], sort_by: str) -> List[Book]:
    """Return ``books`` ordered by a ``"<field>-<asc|desc>"`` key.

    Title and author compare case-insensitively.  Unknown fields fall
    back to ordering by id.
    """
    field, _, direction = sort_by.partition("-")
    reverse = direction == "desc"
    if field == "title":
        return sorted(books, key=lambda b: b.title.casefold(), reverse=reverse)
    if field == "author":
        return sorted(books, key=lambda b: b.author.casefold(), reverse=reverse)
    return sorted(books, key=lambda b: b.id, reverse=reverse)


class CatalogView:
    def __init__(
        self,
        client: Optional[BooksClient] = None,
        page_size: int = PAGE_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client if client is not None else BooksClient()
        self.page_size = page_size
        self._clock = clock

        # Mirror of the server collection
        self.books: List[Book] = []
        self.loading = False
        self.error: Optional[str] = None

        self.query = ""
        self.sort_by: SortKey = DEFAULT_SORT
        self.page = 1

        # Add/edit modal
        self.form_open = False
        self.editing: Optional[Book] = None
        self.form = FormDraft()
        self.form_errors: Dict[str, str] = {}

        self.deleting: Optional[Book] = None
        self._notification: Optional[Notification] = None

    # ------------------------------------------------------------------
    # Loading

    def load(self) -> None:
        """Fetch the full collection into the mirror.

        On failure the error message is kept in ``error`` and the
        mirror is left as it was.
        """
        self.loading = True
        self.error = None
        try:
            self.books = self.client.list_books()
            logger.info("Loaded %d books", len(self.books))
        except BooksApiError as exc:
            self.error = exc.message or "Unknown error"
        finally:
            self.loading = False

    # ------------------------------------------------------------------
    # Search, sort and pagination

    def set_query(self, query: str) -> None:
        self.query = query
        self.page = 1

    def set_sort(self, sort_by: str) -> None:
        if sort_by not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_by!r}")
        self.sort_by = sort_by

    def reset_filters(self) -> None:
        self.query = ""
        self.sort_by = DEFAULT_SORT
        self.page = 1

    @property
    def filtered(self) -> List[Book]:
        return sort_books(filter_books(self.books, self.query), self.sort_by)

    @property
    def total_pages(self) -> int:
        return max(1, -(-len(self.filtered) // self.page_size))

    def _clamp_page(self) -> int:
        # The filtered set may have shrunk since the page was chosen.
        self.page = min(max(1, self.page), self.total_pages)
        return self.page

    def first_page(self) -> None:
        self.page = 1

    def prev_page(self) -> None:
        self.page = max(1, self.page - 1)

    def next_page(self) -> None:
        self.page = min(self.total_pages, self.page + 1)

    def last_page(self) -> None:
        self.page = self.total_pages

    def current_page(self) -> Page:
        filtered = self.filtered
        total = len(filtered)
        page = self._clamp_page()
        start = (page - 1) * self.page_size
        end = start + self.page_size
        return Page(
            page=page,
            page_size=self.page_size,
            total=total,
            total_pages=self.total_pages,
            first_index=min(total, start + 1),
            last_index=min(total, end),
            items=filtered[start:end],
        )

    # ------------------------------------------------------------------
    # Notifications

    def _notify(self, kind: NotificationKind, message: str) -> None:
        self._notification = Notification(
            kind=kind,
            message=message,
            expires_at=self._clock() + NOTIFICATION_SECONDS,
        )

    @property
    def notification(self) -> Optional[Notification]:
        if self._notification is not None and self._clock() >= self._notification.expires_at:
            self._notification = None
        return self._notification

    # ------------------------------------------------------------------
    # Mutations.  Each one re-raises the ``BooksApiError`` after
    # recording the error notification so callers can keep a modal open.

    def create_book(self, title: str, author: str) -> Book:
        try:
            created = self.client.create_book(title, author)
        except BooksApiError as exc:
            self._notify("error", exc.message or "Failed to add")
            raise
        self.books.append(created)
        self._notify("success", "Book added")
        return created

    def update_book(self, book_id: int, title: str, author: str) -> Book:
        try:
            updated = self.client.update_book(book_id, title, author)
        except BooksApiError as exc:
            self._notify("error", exc.message or "Failed to update")
            raise
        self.books = [updated if b.id == updated.id else b for b in self.books]
        self._notify("success", "Book updated")
        return updated

    def remove_book(self, book_id: int) -> None:
        try:
            self.client.delete_book(book_id)
        except BooksApiError as exc:
            self._notify("error", exc.message or "Failed to delete")
            raise
        self.books = [b for b in self.books if b.id != book_id]
        self._notify("success", "Book deleted")

    # ------------------------------------------------------------------
    # Add/edit form

    def open_create(self) -> None:
        self.editing = None
        self.form = FormDraft()
        self.form_errors = {}
        self.form_open = True

    def open_edit(self, book: Book) -> None:
        self.editing = book
        self.form = FormDraft(title=book.title, author=book.author)
        self.form_errors = {}
        self.form_open = True

    def close_form(self) -> None:
        self.form_open = False

    def set_field(self, name: str, value: str) -> None:
        if name not in ("title", "author"):
            raise ValueError(f"Unknown form field: {name!r}")
        setattr(self.form, name, value)

    def validate_form(self) -> bool:
        errors: Dict[str, str] = {}
        if len(self.form.title.strip()) < MIN_TITLE_LENGTH:
            errors["title"] = "Title should be at least 2 chars"
        if len(self.form.author.strip()) < MIN_AUTHOR_LENGTH:
            errors["author"] = "Author should be at least 3 chars"
        self.form_errors = errors
        return not errors

    def submit_form(self) -> bool:
        """Validate the draft and send it to the server.

        Returns ``True`` when the book was saved and the modal closed.
        Validation failures and request failures leave the modal open.
        """
        if not self.validate_form():
            return False
        title = self.form.title.strip()
        author = self.form.author.strip()
        try:
            if self.editing is not None:
                self.update_book(self.editing.id, title, author)
            else:
                self.create_book(title, author)
        except BooksApiError:
            return False
        self.form_open = False
        return True

    # ------------------------------------------------------------------
    # Delete confirmation

    def request_delete(self, book: Book) -> None:
        self.deleting = book

    def cancel_delete(self) -> None:
        self.deleting = None

    def confirm_delete(self) -> bool:
        if self.deleting is None:
            return False
        try:
            self.remove_book(self.deleting.id)
        except BooksApiError:
            return False
        self.deleting = None
        return True
