"""Book repository for data access operations."""

from sqlmodel import Session, select

from .entity import Book, BookPayload
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    The repository flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        """Return every book, newest (highest id) first."""
        statement = select(BookTable).order_by(BookTable.id.desc())
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def create(self, payload: BookPayload) -> Book:
        row = BookTable(title=payload.title, author=payload.author, year=payload.year)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def update(self, book_id: int, payload: BookPayload) -> Book | None:
        """Overwrite title, author and year of an existing book.

        Fields absent from the payload are written as NULL. Returns None when
        no row has the given id.
        """
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None

        row.title = payload.title
        row.author = payload.author
        row.year = payload.year
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: int) -> bool:
        """Delete a book; returns False when nothing matched."""
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        return True
