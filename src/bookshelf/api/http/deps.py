"""FastAPI dependency implementations.

Dependencies take an ``HTTPConnection`` so they resolve for the GraphQL
websocket route as well as for plain HTTP requests.
"""

from __future__ import annotations

from fastapi import HTTPException
from starlette.requests import HTTPConnection

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.core.services import CatalogService


def get_app_dependencies(connection: HTTPConnection) -> ApplicationDependencies:
    """Get the dependencies built at application startup."""
    app_deps: ApplicationDependencies | None = getattr(
        connection.app.state, "app_dependencies", None
    )
    if app_deps is None:
        raise HTTPException(status_code=503, detail="Application not started")
    return app_deps


def get_catalog_service(connection: HTTPConnection) -> CatalogService:
    """Get the catalog service instance."""
    return get_app_dependencies(connection).catalog_service
