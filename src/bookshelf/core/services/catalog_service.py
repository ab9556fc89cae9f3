"""Catalog service: the operation set behind the GraphQL Query and Mutation types."""

from __future__ import annotations

from loguru import logger

from src.bookshelf.entities.author import Author, AuthorRepository
from src.bookshelf.entities.book import Book, BookRepository, BookUpdate


class CatalogService:
    """Translate GraphQL field arguments into repository calls.

    Every method performs exactly one repository operation. Missing records
    come back as ``None`` (or ``False`` for deletes), never as errors.
    """

    def __init__(self, books: BookRepository, authors: AuthorRepository) -> None:
        self._books = books
        self._authors = authors

    def books(self) -> list[Book]:
        return self._books.list_all()

    def book(self, id: str) -> Book | None:
        return self._books.get(id)

    def authors(self) -> list[Author]:
        return self._authors.list_all()

    def author(self, id: str) -> Author | None:
        return self._authors.get(id)

    def create_book(
        self,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> Book:
        book = self._books.create(title, author, year, genre)
        logger.bind(book_id=book.id).info("book.created")
        return book

    def update_book(self, id: str, patch: BookUpdate) -> Book | None:
        """Apply ``patch`` to the book ``id``; omitted fields keep their values."""
        book = self._books.update(id, patch)
        if book is None:
            logger.bind(book_id=id).info("book.update_missed")
            return None
        logger.bind(book_id=id, fields=sorted(patch.changes())).info("book.updated")
        return book

    def delete_book(self, id: str) -> bool:
        deleted = self._books.delete(id)
        logger.bind(book_id=id, deleted=deleted).info("book.deleted")
        return deleted
