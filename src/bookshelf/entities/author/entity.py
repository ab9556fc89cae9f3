"""Entity: Author."""

from pydantic import BaseModel, ConfigDict, Field

from src.bookshelf.entities.book.entity import Book


class Author(BaseModel):
    """Author in the catalog roster.

    ``books`` is never stored. The author repository fills it on every read
    with the books whose ``author`` string equals ``name``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier assigned by the repository")
    name: str = Field(description="Author name, joined to Book.author by equality")
    books: list[Book] = Field(default_factory=list, description="Derived book list")
