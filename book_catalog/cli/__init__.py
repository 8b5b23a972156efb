"""Main CLI application module."""

import typer

from .books_commands import books_app
from .server_commands import init_db_command, serve

app = typer.Typer(
    help="📚 Book Catalog CLI - service and terminal view",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve)
app.command(name="init-db")(init_db_command)
app.add_typer(books_app, name="books")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
