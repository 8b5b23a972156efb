"""Terminal view of the catalog.

Each command drives a CatalogView against a running service and prints the
refreshed collection.
"""

import typer

from book_catalog.client import CatalogClient, CatalogView
from book_catalog.client.http_client import DEFAULT_API_URL

from .utils import console, render_books

books_app = typer.Typer(help="📚 Browse and edit the catalog")

ApiUrlOption = typer.Option(
    DEFAULT_API_URL, "--api-url", envvar="BOOK_CATALOG_API_URL", help="Catalog API base URL"
)


def _open_view(api_url: str) -> CatalogView:
    return CatalogView(CatalogClient(api_url))


def _show(view: CatalogView, refreshed: bool) -> None:
    if not refreshed:
        console.print("[yellow]⚠️  Could not refresh the catalog; showing last known data[/yellow]")
    console.print(render_books(view.books))


@books_app.command(name="list")
def list_books(api_url: str = ApiUrlOption) -> None:
    """📋 List all books, newest first."""
    view = _open_view(api_url)
    _show(view, view.mount())


@books_app.command(name="add")
def add_book(
    title: str = typer.Option(..., help="Book title"),
    author: str = typer.Option(..., help="Book author"),
    year: int | None = typer.Option(None, help="Publication year"),
    api_url: str = ApiUrlOption,
) -> None:
    """➕ Add a book."""
    view = _open_view(api_url)
    view.draft.title = title
    view.draft.author = author
    view.draft.year = year
    _show(view, view.submit())


@books_app.command(name="edit")
def edit_book(
    book_id: int = typer.Argument(..., help="ID of the book to edit"),
    title: str | None = typer.Option(None, help="New title"),
    author: str | None = typer.Option(None, help="New author"),
    year: int | None = typer.Option(None, help="New publication year"),
    clear_year: bool = typer.Option(False, "--clear-year", help="Remove the year"),
    api_url: str = ApiUrlOption,
) -> None:
    """✏️  Edit a book. Unspecified fields keep their current value.

    Unlike the API, which answers a PUT to a missing id with null, this
    command refuses an id that is not in the catalog and exits with status 1.
    """
    view = _open_view(api_url)
    if not view.mount():
        _show(view, False)
        raise typer.Exit(1)

    book = view.find(book_id)
    if book is None:
        console.print(f"[red]❌ No book with id {book_id}[/red]")
        raise typer.Exit(1)

    view.start_edit(book)
    if title is not None:
        view.draft.title = title
    if author is not None:
        view.draft.author = author
    if year is not None:
        view.draft.year = year
    if clear_year:
        view.draft.year = None
    _show(view, view.submit())


@books_app.command(name="delete")
def delete_book(
    book_id: int = typer.Argument(..., help="ID of the book to delete"),
    api_url: str = ApiUrlOption,
) -> None:
    """🗑️  Delete a book."""
    view = _open_view(api_url)
    _show(view, view.delete(book_id))
