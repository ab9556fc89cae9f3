"""Author repository with book lists derived from the book repository."""

from __future__ import annotations

import threading

from src.bookshelf.core.storage import IdSequence
from src.bookshelf.entities.author.entity import Author
from src.bookshelf.entities.book.repository import BookRepository


class AuthorRepository:
    """Thread-safe in-memory roster of authors.

    The repository owns author identity and names only. Each read asks the
    book repository for the author's books by name, so the relationship is
    as current as the book store at the moment of the call. Renaming a book's
    author string silently detaches it from the author; matching on an author
    identifier would be sturdier but is not what clients rely on.
    """

    def __init__(
        self, books: BookRepository, sequence: IdSequence | None = None
    ) -> None:
        self._authors: dict[str, Author] = {}
        self._lock = threading.Lock()
        self._sequence = sequence or IdSequence()
        self._book_repository = books

    def add(self, name: str) -> Author:
        """Register an author. Used when seeding the roster."""
        with self._lock:
            author = Author(id=self._sequence.next(), name=name)
            self._authors[author.id] = author
        return self._with_books(author)

    def list_all(self) -> list[Author]:
        with self._lock:
            authors = list(self._authors.values())
        return [self._with_books(author) for author in authors]

    def get(self, author_id: str) -> Author | None:
        with self._lock:
            author = self._authors.get(author_id)
        if author is None:
            return None
        return self._with_books(author)

    def get_by_name(self, name: str) -> Author | None:
        with self._lock:
            author = next(
                (a for a in self._authors.values() if a.name == name), None
            )
        if author is None:
            return None
        return self._with_books(author)

    def count(self) -> int:
        with self._lock:
            return len(self._authors)

    def _with_books(self, author: Author) -> Author:
        return author.model_copy(
            update={"books": self._book_repository.list_by_author_name(author.name)}
        )
