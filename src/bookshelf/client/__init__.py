"""HTTP client for the Bookshelf GraphQL endpoint."""

from .graphql_client import (
    BookshelfClient,
    BookshelfClientError,
    GraphQLResponseError,
)
from .settings import ClientSettings

__all__ = [
    "BookshelfClient",
    "BookshelfClientError",
    "ClientSettings",
    "GraphQLResponseError",
]
