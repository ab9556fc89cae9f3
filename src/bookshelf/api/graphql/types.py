"""GraphQL object types for the catalog."""

from __future__ import annotations

import strawberry

from src.bookshelf.entities.author import Author
from src.bookshelf.entities.book import Book


@strawberry.type(name="Book", description="A book in the catalog")
class BookType:
    id: strawberry.ID
    title: str
    author: str = strawberry.field(description="Name of the book's author")
    year: int | None = None
    genre: str | None = None

    @classmethod
    def from_entity(cls, book: Book) -> BookType:
        return cls(
            id=strawberry.ID(book.id),
            title=book.title,
            author=book.author,
            year=book.year,
            genre=book.genre,
        )


@strawberry.type(name="Author", description="An author and the books credited to them")
class AuthorType:
    id: strawberry.ID
    name: str
    books: list[BookType] = strawberry.field(
        description="Books whose author field equals this author's name"
    )

    @classmethod
    def from_entity(cls, author: Author) -> AuthorType:
        return cls(
            id=strawberry.ID(author.id),
            name=author.name,
            books=[BookType.from_entity(book) for book in author.books],
        )
