"""GraphQL layer exposing the catalog over strawberry.

- types: Book and Author object types
- context: per-request context carrying the catalog service
- schema: Query and Mutation roots and schema construction
- router: FastAPI router serving the schema
"""

from .context import BookshelfContext, get_graphql_context
from .router import create_graphql_router
from .schema import Mutation, Query, build_schema
from .types import AuthorType, BookType

__all__ = [
    "AuthorType",
    "BookType",
    "BookshelfContext",
    "Mutation",
    "Query",
    "build_schema",
    "create_graphql_router",
    "get_graphql_context",
]
