# bookshelf/storage.py
import logging
import time
from typing import List, Optional

from .models import Book, BookPayload


logger = logging.getLogger(__name__)

SEED_BOOKS = [
    {"id": 1, "title": "The Hobbit", "author": "J.R.R. Tolkien"},
    {"id": 2, "title": "1984", "author": "George Orwell"},
]

BOOKS: List[Book] = [Book(**entry) for entry in SEED_BOOKS]


class BookNotFound(Exception):
    def __init__(self, book_id: int):
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


def _new_book_id() -> int:
    # Milliseconds since the epoch; two creates in the same millisecond collide.
    return int(time.time() * 1000)


def reset_books(seed: bool = True) -> None:
    BOOKS.clear()
    if seed:
        BOOKS.extend(Book(**entry) for entry in SEED_BOOKS)


def list_books() -> List[Book]:
    return BOOKS


def get_book(book_id: int) -> Optional[Book]:
    return next((b for b in BOOKS if b.id == book_id), None)


def add_book(req: BookPayload) -> Book:
    book = Book(id=_new_book_id(), title=req.title, author=req.author)
    BOOKS.append(book)
    logger.info("Created book %s (%r by %r)", book.id, book.title, book.author)
    return book


def update_book(book_id: int, req: BookPayload) -> Book:
    index = next((i for i, b in enumerate(BOOKS) if b.id == book_id), None)
    if index is None:
        raise BookNotFound(book_id)

    # The whole record is replaced; the id comes from the caller, not the stored book.
    BOOKS[index] = Book(id=book_id, title=req.title, author=req.author)
    logger.info("Updated book %s", book_id)
    return BOOKS[index]


def delete_book(book_id: int) -> None:
    before = len(BOOKS)
    BOOKS[:] = [b for b in BOOKS if b.id != book_id]
    logger.info("Deleted book %s (%d removed)", book_id, before - len(BOOKS))
