"""Commands for running the service and inspecting its schema."""

import typer
from rich.panel import Panel

from src.bookshelf.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(
        None, help="Host to bind the server to (defaults to app.host)"
    ),
    port: int | None = typer.Option(
        None, help="Port to bind the server to (defaults to app.port)"
    ),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Uvicorn log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the Bookshelf GraphQL server.

    The catalog lives in memory and is reseeded on every start.
    """
    import uvicorn

    app_config = get_config().app
    host = app_config.host if host is None else host
    port = app_config.port if port is None else port

    console.print(
        Panel.fit(
            f"[bold green]Bookshelf GraphQL API on http://{host}:{port}/graphql[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.bookshelf.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )


def schema() -> None:
    """📜 Print the GraphQL schema (SDL)."""
    from src.bookshelf.api.graphql import build_schema

    console.print(build_schema().as_str(), markup=False, highlight=False, soft_wrap=True)
