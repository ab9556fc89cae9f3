"""Per-request GraphQL context."""

from fastapi import Depends
from strawberry.fastapi import BaseContext

from src.bookshelf.api.http.deps import get_catalog_service
from src.bookshelf.core.services import CatalogService


class BookshelfContext(BaseContext):
    """Context handed to resolvers as ``info.context``."""

    def __init__(self, catalog: CatalogService) -> None:
        super().__init__()
        self.catalog = catalog


async def get_graphql_context(
    catalog: CatalogService = Depends(get_catalog_service),
) -> BookshelfContext:
    return BookshelfContext(catalog)
