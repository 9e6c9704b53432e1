"""
Pydantic schemas used by the catalog client.

``Page`` bundles the books visible on the current page with the
pagination metadata a frontend needs to render its footer ("Showing
1-8 of 20 books", page 1/3).  ``FormDraft`` holds the add/edit form
fields while the modal is open, and ``Notification`` is the transient
message shown after a create, update or delete.
"""

from typing import List

from pydantic import BaseModel
from typing_extensions import Literal

from ..models import Book


SortKey = Literal["id-desc", "id-asc", "title-asc", "title-desc", "author-asc", "author-desc"]

NotificationKind = Literal["success", "error"]


class Page(BaseModel):
    """A page of the filtered and sorted mirror.

    ``first_index`` and ``last_index`` are 1-based positions in the
    filtered set, clamped to ``total`` so an empty result shows
    "0-0 of 0".
    """

    page: int
    page_size: int
    total: int
    total_pages: int
    first_index: int
    last_index: int
    items: List[Book]


class FormDraft(BaseModel):
    title: str = ""
    author: str = ""


class Notification(BaseModel):
    kind: NotificationKind
    message: str
    # Monotonic clock reading after which the notification is hidden.
    expires_at: float
