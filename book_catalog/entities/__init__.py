"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .book import Book, BookPayload, BookRepository, BookTable

__all__ = ["Book", "BookPayload", "BookTable", "BookRepository"]
