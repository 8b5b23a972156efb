"""Shared utilities for CLI commands."""

from rich.console import Console
from rich.table import Table

from book_catalog.entities.book import Book

console = Console()


def render_books(books: list[Book]) -> Table:
    """Render the collection the way the catalog page shows it."""
    table = Table(title="Books Library")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Author")
    table.add_column("Year", justify="right")

    for book in books:
        table.add_row(
            str(book.id),
            book.title,
            book.author,
            "" if book.year is None else str(book.year),
        )
    return table
