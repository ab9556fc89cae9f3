"""Author commands backed by the GraphQL client."""

import typer
from rich.table import Table

from .utils import console, open_client

authors_app = typer.Typer(help="✍️  Author commands", no_args_is_help=True)


@authors_app.command("list")
def list_authors(
    url: str | None = typer.Option(
        None, "--url", help="GraphQL endpoint (defaults to BOOKSHELF_URL)"
    ),
) -> None:
    """📋 List authors and the books credited to them."""
    with open_client(url) as client:
        authors = client.list_authors()

    if not authors:
        console.print("[yellow]No authors in the catalog[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="blue")
    table.add_column("Books", style="green")
    for author in authors:
        titles = ", ".join(book["title"] for book in author["books"])
        table.add_row(author["id"], author["name"], titles or "-")

    console.print(table)
