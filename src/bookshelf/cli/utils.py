"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from src.bookshelf.client import BookshelfClient, BookshelfClientError

console = Console()


@contextmanager
def open_client(url: str | None) -> Iterator[BookshelfClient]:
    """Yield a client, turning client failures into a red message and exit code 1."""
    try:
        with BookshelfClient(url=url) as client:
            yield client
    except BookshelfClientError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None


def books_table(books: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Author", style="blue")
    table.add_column("Year", style="yellow", justify="right")
    table.add_column("Genre", style="yellow")
    for book in books:
        table.add_row(
            book["id"],
            book["title"],
            book["author"],
            "" if book.get("year") is None else str(book["year"]),
            book.get("genre") or "",
        )
    return table
