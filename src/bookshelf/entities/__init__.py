"""Entities module organised by catalog concept.

Each entity has its own package containing:
- entity.py: Domain model
- repository.py: Thread-safe in-memory store owning the entity's lifecycle
"""

from .author import Author, AuthorRepository
from .book import Book, BookRepository, BookUpdate

__all__ = [
    "Author",
    "AuthorRepository",
    "Book",
    "BookRepository",
    "BookUpdate",
]
