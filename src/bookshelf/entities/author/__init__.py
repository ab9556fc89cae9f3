"""Entity package: Author."""

from .entity import Author
from .repository import AuthorRepository

__all__ = ["Author", "AuthorRepository"]
