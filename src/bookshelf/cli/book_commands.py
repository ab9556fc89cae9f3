"""Book management commands backed by the GraphQL client."""

from typing import Any

import typer
from rich.panel import Panel

from .utils import books_table, console, open_client

books_app = typer.Typer(help="📖 Book catalog commands", no_args_is_help=True)

URL_OPTION = typer.Option(
    None, "--url", help="GraphQL endpoint (defaults to BOOKSHELF_URL)"
)


@books_app.command("list")
def list_books(url: str | None = URL_OPTION) -> None:
    """📋 List all books."""
    with open_client(url) as client:
        books = client.list_books()

    if not books:
        console.print("[yellow]No books in the catalog[/yellow]")
        return
    console.print(books_table(books))
    console.print(f"\n[dim]Showing {len(books)} books[/dim]")


@books_app.command("get")
def get_book(
    book_id: str = typer.Argument(..., help="Book ID"),
    url: str | None = URL_OPTION,
) -> None:
    """🔎 Show a single book."""
    with open_client(url) as client:
        book = client.get_book(book_id)

    if book is None:
        console.print(f"[red]❌ Book '{book_id}' not found[/red]")
        raise typer.Exit(1)
    console.print(books_table([book]))


@books_app.command("create")
def create_book(
    title: str = typer.Option(..., help="Book title"),
    author: str = typer.Option(..., help="Author name"),
    year: int | None = typer.Option(None, help="Publication year"),
    genre: str | None = typer.Option(None, help="Genre"),
    url: str | None = URL_OPTION,
) -> None:
    """➕ Create a book."""
    with open_client(url) as client:
        book = client.create_book(title, author, year=year, genre=genre)

    console.print(
        Panel.fit(
            f"[bold green]✅ Created book {book['id']}[/bold green]",
            border_style="green",
        )
    )
    console.print(books_table([book]))


@books_app.command("update")
def update_book(
    book_id: str = typer.Argument(..., help="Book ID"),
    title: str | None = typer.Option(None, help="New title"),
    author: str | None = typer.Option(None, help="New author name"),
    year: int | None = typer.Option(None, help="New publication year"),
    genre: str | None = typer.Option(None, help="New genre"),
    clear_year: bool = typer.Option(False, "--clear-year", help="Remove the year"),
    clear_genre: bool = typer.Option(False, "--clear-genre", help="Remove the genre"),
    url: str | None = URL_OPTION,
) -> None:
    """✏️  Update a book. Only the options given are sent; the rest are kept."""
    if clear_year and year is not None:
        raise typer.BadParameter("--year and --clear-year are mutually exclusive")
    if clear_genre and genre is not None:
        raise typer.BadParameter("--genre and --clear-genre are mutually exclusive")

    fields: dict[str, Any] = {}
    if title is not None:
        fields["title"] = title
    if author is not None:
        fields["author"] = author
    if year is not None or clear_year:
        fields["year"] = year
    if genre is not None or clear_genre:
        fields["genre"] = genre

    if not fields:
        console.print("[yellow]Nothing to update[/yellow]")
        return

    with open_client(url) as client:
        book = client.update_book(book_id, **fields)

    if book is None:
        console.print(f"[red]❌ Book '{book_id}' not found[/red]")
        raise typer.Exit(1)
    console.print(books_table([book]))


@books_app.command("delete")
def delete_book(
    book_id: str = typer.Argument(..., help="Book ID"),
    url: str | None = URL_OPTION,
) -> None:
    """🗑️  Delete a book."""
    with open_client(url) as client:
        deleted = client.delete_book(book_id)

    if not deleted:
        console.print(f"[yellow]Book '{book_id}' did not exist[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Deleted book {book_id}[/green]")
