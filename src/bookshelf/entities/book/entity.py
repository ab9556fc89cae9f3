"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Book record owned by the book repository.

    Instances are immutable; an update replaces the stored record with a new
    instance carrying the same ``id``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier assigned by the repository")
    title: str = Field(description="Title")
    author: str = Field(description="Name of the author, matched against Author.name")
    year: int | None = Field(default=None, description="Publication year")
    genre: str | None = Field(default=None, description="Genre")


class BookUpdate(BaseModel):
    """Partial update for a book.

    Only the fields the caller actually supplied end up in
    ``model_fields_set``; anything omitted keeps its stored value. An explicit
    ``None`` clears ``year`` or ``genre``, while ``None`` for the non-null
    ``title`` and ``author`` leaves them untouched.
    """

    title: str | None = None
    author: str | None = None
    year: int | None = None
    genre: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the supplied fields that should overwrite the stored record."""
        supplied = self.model_dump(include=self.model_fields_set)
        return {
            name: value
            for name, value in supplied.items()
            if value is not None or name in ("year", "genre")
        }

    def is_empty(self) -> bool:
        return not self.changes()
