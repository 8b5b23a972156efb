"""Book entity module.

This module contains all Book-related classes organized by responsibility:
- Book: Domain entity returned to clients
- BookPayload: Request body for create and update
- BookTable: Database persistence model
- BookRepository: Data access layer
"""

from .entity import Book, BookPayload
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookPayload", "BookTable", "BookRepository"]
