"""Synchronous client issuing the catalog operations over HTTP POST."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from src.bookshelf.client import documents
from src.bookshelf.client.settings import ClientSettings

_UPDATABLE_FIELDS = ("title", "author", "year", "genre")


class BookshelfClientError(Exception):
    """Raised when the endpoint cannot be reached or answers with a non-2xx status."""


class GraphQLResponseError(BookshelfClientError):
    """Raised when the response envelope carries GraphQL errors."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        messages = "; ".join(e.get("message", "unknown error") for e in errors)
        super().__init__(messages)


class BookshelfClient:
    """Client for the Bookshelf GraphQL endpoint.

    Results are returned as plain dicts exactly as the server serialized
    them; ``None`` stands for a GraphQL ``null`` (an unknown id).

    Example:
        with BookshelfClient() as client:
            book = client.create_book("Dune", "Frank Herbert", year=1965)
            client.update_book(book["id"], genre="Science Fiction")
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        settings = settings or ClientSettings()
        self.url = url or settings.url
        self._client = httpx.Client(
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )

    def __enter__(self) -> BookshelfClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def execute(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """POST a document and return the ``data`` member of the envelope."""
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self._client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BookshelfClientError(
                f"GraphQL endpoint returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise BookshelfClientError(f"Request to {self.url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise BookshelfClientError(
                f"GraphQL endpoint at {self.url} returned a non-JSON body"
            ) from e

        if body.get("errors"):
            logger.debug("GraphQL errors from {}: {}", self.url, body["errors"])
            raise GraphQLResponseError(body["errors"])
        return body.get("data") or {}

    def list_books(self) -> list[dict[str, Any]]:
        return self.execute(documents.GET_BOOKS)["books"]

    def get_book(self, id: str) -> dict[str, Any] | None:
        return self.execute(documents.GET_BOOK, {"id": id})["book"]

    def list_authors(self) -> list[dict[str, Any]]:
        return self.execute(documents.GET_AUTHORS)["authors"]

    def get_author(self, id: str) -> dict[str, Any] | None:
        return self.execute(documents.GET_AUTHOR, {"id": id})["author"]

    def create_book(
        self,
        title: str,
        author: str,
        year: int | None = None,
        genre: str | None = None,
    ) -> dict[str, Any]:
        variables = {"title": title, "author": author, "year": year, "genre": genre}
        return self.execute(documents.CREATE_BOOK, variables)["createBook"]

    def update_book(self, id: str, **fields: Any) -> dict[str, Any] | None:
        """Update a book, sending only the keyword arguments given.

        Passing ``year=None`` clears the year; leaving ``year`` out keeps it.
        """
        unknown = set(fields) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown book fields: {', '.join(sorted(unknown))}")

        names = [name for name in _UPDATABLE_FIELDS if name in fields]
        variables = {"id": id, **{name: fields[name] for name in names}}
        return self.execute(documents.update_book_document(names), variables)[
            "updateBook"
        ]

    def delete_book(self, id: str) -> bool:
        return self.execute(documents.DELETE_BOOK, {"id": id})["deleteBook"]
