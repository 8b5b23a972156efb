"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlmodel import Session

from book_catalog.api.http.deps import get_book_repository, get_db_session
from book_catalog.entities.book import Book, BookPayload, BookRepository

router = APIRouter(tags=["books"])

DELETED_MESSAGE = "Book deleted successfully"


@router.get("", response_model=list[Book])
def list_books(
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List all books, newest first."""
    return repository.list_all()


@router.post("", response_model=Book)
def create_book(
    payload: BookPayload,
    session: Session = Depends(get_db_session),
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a new book; the store assigns its id."""
    logger.debug("Create book payload: {}", payload.model_dump())
    created_book = repository.create(payload)
    session.commit()
    logger.info("Book {} created", created_book.id)
    return created_book


@router.put("/{book_id}", response_model=Book | None)
def update_book(
    book_id: int,
    payload: BookPayload,
    session: Session = Depends(get_db_session),
    repository: BookRepository = Depends(get_book_repository),
) -> Book | None:
    """Overwrite a book. Answers null when the id does not exist."""
    logger.debug("Update book {} payload: {}", book_id, payload.model_dump())
    updated_book = repository.update(book_id, payload)
    session.commit()
    if updated_book is None:
        logger.info("Book {} not found for update", book_id)
    return updated_book


@router.delete("/{book_id}")
def delete_book(
    book_id: int,
    session: Session = Depends(get_db_session),
    repository: BookRepository = Depends(get_book_repository),
) -> dict[str, str]:
    """Delete a book. Deleting a missing id succeeds too."""
    deleted = repository.delete(book_id)
    session.commit()
    logger.info("Book {} delete requested (row removed: {})", book_id, deleted)
    return {"message": DELETED_MESSAGE}
