"""CLI tests: commands talk to the real schema through a mocked HTTP transport."""

import json

import httpx
import pytest
from typer.testing import CliRunner

from src.bookshelf.api.graphql import BookshelfContext, build_schema
from src.bookshelf.cli import app
from src.bookshelf.client import BookshelfClient
from src.bookshelf.core.services import CatalogService
from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import with_context

runner = CliRunner()


@pytest.fixture(autouse=True)
def schema_backed_client(monkeypatch, catalog_service: CatalogService):
    """Serve client requests from an in-process schema over the seeded catalog."""
    schema = build_schema()

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        result = schema.execute_sync(
            body["query"],
            variable_values=body.get("variables"),
            context_value=BookshelfContext(catalog_service),
        )
        envelope = {"data": result.data}
        if result.errors:
            envelope["errors"] = [error.formatted for error in result.errors]
        return httpx.Response(200, json=envelope)

    def client_factory(url=None):
        return BookshelfClient(
            url=url or "http://bookshelf.test/graphql",
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr("src.bookshelf.cli.utils.BookshelfClient", client_factory)


class TestBookCommands:
    def test_list(self):
        result = runner.invoke(app, ["books", "list"])

        assert result.exit_code == 0
        assert "1984" in result.output
        assert "Showing 4 books" in result.output

    def test_get_unknown(self):
        result = runner.invoke(app, ["books", "get", "999"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_create(self, catalog_service: CatalogService):
        result = runner.invoke(
            app, ["books", "create", "--title", "Dune", "--author", "Herbert", "--year", "1965"]
        )

        assert result.exit_code == 0
        assert "Created book 5" in result.output
        assert catalog_service.book("5").year == 1965

    def test_update_keeps_unspecified_fields(self, catalog_service: CatalogService):
        result = runner.invoke(app, ["books", "update", "3", "--genre", "Political"])

        assert result.exit_code == 0
        book = catalog_service.book("3")
        assert book.genre == "Political"
        assert book.title == "1984"
        assert book.year == 1949

    def test_update_clear_year(self, catalog_service: CatalogService):
        result = runner.invoke(app, ["books", "update", "3", "--clear-year"])

        assert result.exit_code == 0
        assert catalog_service.book("3").year is None

    def test_update_conflicting_options(self):
        result = runner.invoke(app, ["books", "update", "3", "--year", "1950", "--clear-year"])

        assert result.exit_code != 0

    def test_update_without_options(self, catalog_service: CatalogService):
        result = runner.invoke(app, ["books", "update", "3"])

        assert result.exit_code == 0
        assert "Nothing to update" in result.output

    def test_update_unknown(self):
        result = runner.invoke(app, ["books", "update", "999", "--title", "X"])

        assert result.exit_code == 1

    def test_delete(self, catalog_service: CatalogService):
        first = runner.invoke(app, ["books", "delete", "2"])
        second = runner.invoke(app, ["books", "delete", "2"])

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert catalog_service.book("2") is None


class TestAuthorCommands:
    def test_list(self):
        result = runner.invoke(app, ["authors", "list"])

        assert result.exit_code == 0
        assert "1984" in result.output
        assert "Harper Lee" in result.output


class TestConnectionErrors:
    def test_unreachable_server(self, monkeypatch):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        monkeypatch.setattr(
            "src.bookshelf.cli.utils.BookshelfClient",
            lambda url=None: BookshelfClient(
                url="http://down.test/graphql",
                transport=httpx.MockTransport(refuse),
            ),
        )

        result = runner.invoke(app, ["books", "list"])

        assert result.exit_code == 1
        assert "failed" in result.output

    def test_non_json_response(self, monkeypatch):
        def proxy_page(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy</html>")

        monkeypatch.setattr(
            "src.bookshelf.cli.utils.BookshelfClient",
            lambda url=None: BookshelfClient(
                url="http://proxy.test/graphql",
                transport=httpx.MockTransport(proxy_page),
            ),
        )

        result = runner.invoke(app, ["books", "list"])

        assert result.exit_code == 1
        assert "non-JSON" in result.output


class TestServeCommand:
    @pytest.fixture
    def uvicorn_calls(self, monkeypatch) -> list[dict]:
        calls: list[dict] = []
        monkeypatch.setattr(
            "uvicorn.run", lambda target, **kwargs: calls.append({"target": target, **kwargs})
        )
        return calls

    def test_host_and_port_default_to_config(self, uvicorn_calls):
        with with_context(ConfigData(app={"host": "127.0.0.5", "port": 9123})):
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        assert uvicorn_calls[0]["host"] == "127.0.0.5"
        assert uvicorn_calls[0]["port"] == 9123
        assert uvicorn_calls[0]["target"] == "src.bookshelf.api.http.app:app"

    def test_options_override_config(self, uvicorn_calls):
        result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "8081"])

        assert result.exit_code == 0
        assert (uvicorn_calls[0]["host"], uvicorn_calls[0]["port"]) == ("0.0.0.0", 8081)


class TestSchemaCommand:
    def test_prints_sdl(self):
        result = runner.invoke(app, ["schema"])

        assert result.exit_code == 0
        assert "type Mutation" in result.output
        assert "deleteBook(id: ID!): Boolean!" in result.output
