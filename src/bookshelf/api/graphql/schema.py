"""Query and Mutation roots of the catalog schema."""

from typing import Any

import strawberry
from graphql import GraphQLError
from loguru import logger
from strawberry.types import ExecutionContext, Info

from src.bookshelf.api.graphql.context import BookshelfContext
from src.bookshelf.api.graphql.types import AuthorType, BookType
from src.bookshelf.entities.book import BookUpdate

CatalogInfo = Info[BookshelfContext, None]


@strawberry.type
class Query:
    @strawberry.field(description="All books in insertion order")
    def books(self, info: CatalogInfo) -> list[BookType]:
        return [BookType.from_entity(b) for b in info.context.catalog.books()]

    @strawberry.field(description="A single book, or null when the id is unknown")
    def book(self, info: CatalogInfo, id: strawberry.ID) -> BookType | None:
        book = info.context.catalog.book(id)
        return BookType.from_entity(book) if book else None

    @strawberry.field(description="All authors with their books")
    def authors(self, info: CatalogInfo) -> list[AuthorType]:
        return [AuthorType.from_entity(a) for a in info.context.catalog.authors()]

    @strawberry.field(description="A single author, or null when the id is unknown")
    def author(self, info: CatalogInfo, id: strawberry.ID) -> AuthorType | None:
        author = info.context.catalog.author(id)
        return AuthorType.from_entity(author) if author else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_book(
        self,
        info: CatalogInfo,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> BookType:
        book = info.context.catalog.create_book(title, author, year, genre)
        return BookType.from_entity(book)

    @strawberry.mutation(
        description="Update the supplied fields of a book; omitted fields are kept"
    )
    def update_book(
        self,
        info: CatalogInfo,
        id: strawberry.ID,
        title: str | None = strawberry.UNSET,
        author: str | None = strawberry.UNSET,
        year: int | None = strawberry.UNSET,
        genre: str | None = strawberry.UNSET,
    ) -> BookType | None:
        supplied = {
            name: value
            for name, value in (
                ("title", title),
                ("author", author),
                ("year", year),
                ("genre", genre),
            )
            if value is not strawberry.UNSET
        }
        book = info.context.catalog.update_book(id, BookUpdate(**supplied))
        return BookType.from_entity(book) if book else None

    @strawberry.mutation(description="Delete a book; true iff a record was removed")
    def delete_book(self, info: CatalogInfo, id: strawberry.ID) -> bool:
        return info.context.catalog.delete_book(id)


class CatalogSchema(strawberry.Schema):
    """Schema that reports GraphQL errors through loguru."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            context: dict[str, Any] = {
                "path": error.path,
                "error_type": type(original).__name__ if original else "GraphQLError",
            }
            if original is None:
                logger.bind(**context).warning("graphql.error: {}", error.message)
            else:
                logger.opt(exception=original).bind(**context).error(
                    "graphql.error: {}", error.message
                )


def build_schema() -> CatalogSchema:
    return CatalogSchema(query=Query, mutation=Mutation)
