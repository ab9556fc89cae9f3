"""FastAPI router serving the catalog schema."""

from strawberry.fastapi import GraphQLRouter

from src.bookshelf.api.graphql.context import get_graphql_context
from src.bookshelf.api.graphql.schema import build_schema


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    """Build the GraphQL router; GraphiQL is served on GET when enabled."""
    return GraphQLRouter(
        build_schema(),
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if graphiql else None,
    )
