"""Service lifecycle CLI commands."""

import typer
from rich.panel import Panel

from book_catalog.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind (default from config)"),
    port: int | None = typer.Option(None, help="Port to bind (default from config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the catalog API server.

    The books table is created before the first request is accepted.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Book Catalog Service[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")

    uvicorn.run(
        "book_catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


def init_db_command() -> None:
    """🗄️  Create the books table if it does not exist."""
    from book_catalog.runtime.init_db import init_db

    init_db()
    console.print("[green]✅ Database table created/verified[/green]")
