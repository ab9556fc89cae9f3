"""Entity package: Book."""

from .entity import Book, BookUpdate
from .repository import BookRepository

__all__ = ["Book", "BookRepository", "BookUpdate"]
