"""View state of the catalog UI.

The view keeps three things: the book collection, the input draft shared by
the create and edit forms, and the book being edited. The collection is only
ever replaced by a fresh List call after a mutation, never patched in place.

Failures (transport errors, error statuses, bodies that are not a book list)
are logged and leave the state untouched.
"""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import BaseModel

from book_catalog.client.http_client import CatalogClient
from book_catalog.entities.book import Book


class BookDraft(BaseModel):
    """In-progress form input."""

    title: str = ""
    author: str = ""
    year: int | None = None

    def to_payload(self) -> dict:
        return self.model_dump()


class CatalogView:
    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.books: list[Book] = []
        self.draft = BookDraft()
        self.editing: Book | None = None

    def refresh(self) -> bool:
        """Replace the collection with the service's current list."""
        try:
            self.books = self.client.list_books()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching books: {}", exc)
            return False
        return True

    def mount(self) -> bool:
        return self.refresh()

    def submit(self) -> bool:
        """Submit the draft: update when editing, otherwise create."""
        if self.editing is not None:
            return self.submit_edit()

        try:
            self.client.create_book(self.draft.to_payload())
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error adding book: {}", exc)
            return False

        self.draft = BookDraft()
        return self.refresh()

    def delete(self, book_id: int) -> bool:
        try:
            self.client.delete_book(book_id)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error deleting book: {}", exc)
            return False
        return self.refresh()

    def start_edit(self, book: Book) -> None:
        self.editing = book
        self.draft = BookDraft(title=book.title, author=book.author, year=book.year)

    def cancel_edit(self) -> None:
        self.editing = None
        self.draft = BookDraft()

    def submit_edit(self) -> bool:
        if self.editing is None:
            raise RuntimeError("No book is being edited")

        try:
            self.client.update_book(self.editing.id, self.draft.to_payload())
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error updating book: {}", exc)
            return False

        self.cancel_edit()
        return self.refresh()

    def find(self, book_id: int) -> Book | None:
        return next((book for book in self.books if book.id == book_id), None)
