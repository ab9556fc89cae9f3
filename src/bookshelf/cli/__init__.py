"""Main CLI application module."""

import typer

from .author_commands import authors_app
from .book_commands import books_app
from .server_commands import schema, serve

app = typer.Typer(
    help="📚 Bookshelf CLI - run the GraphQL service and manage the catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve)
app.command(name="schema")(schema)
app.add_typer(books_app, name="books")
app.add_typer(authors_app, name="authors")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
