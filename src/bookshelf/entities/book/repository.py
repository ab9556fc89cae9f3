"""Book repository: the single source of truth for book records."""

from __future__ import annotations

import threading

from src.bookshelf.core.storage import IdSequence
from src.bookshelf.entities.book.entity import Book, BookUpdate


class BookRepository:
    """Thread-safe in-memory store for books.

    Records live in an insertion-ordered dict guarded by a re-entrant lock.
    Readers receive copies of the collection; the records themselves are
    frozen, so a reader never observes a half-applied update.
    """

    def __init__(self, sequence: IdSequence | None = None) -> None:
        self._books: dict[str, Book] = {}
        self._lock = threading.RLock()
        self._sequence = sequence or IdSequence()

    def list_all(self) -> list[Book]:
        with self._lock:
            return list(self._books.values())

    def get(self, book_id: str) -> Book | None:
        with self._lock:
            return self._books.get(book_id)

    def create(
        self,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> Book:
        with self._lock:
            book = Book(
                id=self._sequence.next(),
                title=title,
                author=author,
                year=year,
                genre=genre,
            )
            self._books[book.id] = book
            return book

    def update(self, book_id: str, patch: BookUpdate) -> Book | None:
        """Merge ``patch`` over the stored book.

        Returns ``None`` without touching the store when ``book_id`` is unknown.
        """
        with self._lock:
            existing = self._books.get(book_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=patch.changes())
            self._books[book_id] = updated
            return updated

    def delete(self, book_id: str) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None

    def list_by_author_name(self, name: str) -> list[Book]:
        """Books whose ``author`` equals ``name`` exactly (case-sensitive)."""
        with self._lock:
            return [book for book in self._books.values() if book.author == name]

    def count(self) -> int:
        with self._lock:
            return len(self._books)
