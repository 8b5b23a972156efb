"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from book_catalog.api.http.app_data import ApplicationDependencies
from book_catalog.core.services import DbSessionService
from book_catalog.entities.book import BookRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> DbSessionService:
    """Get the database service instance."""
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open one session per request and release it on every exit path."""
    with database_service.session_scope() as session:
        yield session


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(db)
