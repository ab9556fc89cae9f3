"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.bookshelf import __version__
from src.bookshelf.api.graphql import create_graphql_router
from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.api.http.middleware.limiter import (
    close_rate_limiter,
    configure_rate_limiter,
    rate_limit,
)
from src.bookshelf.api.http.routers.health import router as health_router
from src.bookshelf.api.utils.app_startup import configure_logging
from src.bookshelf.core.services import CatalogService
from src.bookshelf.entities.author import AuthorRepository
from src.bookshelf.entities.book import BookRepository
from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import get_config
from src.bookshelf.runtime.seed import seed_catalog


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if request.app.state.config.app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")
            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def build_dependencies(seed: bool) -> ApplicationDependencies:
    """Create the catalog stores and the service on top of them."""
    books = BookRepository()
    authors = AuthorRepository(books)
    if seed:
        seed_catalog(books, authors)
    return ApplicationDependencies(
        book_repository=books,
        author_repository=authors,
        catalog_service=CatalogService(books, authors),
    )


async def startup(app: FastAPI) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)
    app.state.app_dependencies = build_dependencies(seed=config.catalog.seed)
    configure_rate_limiter()


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    await close_rate_limiter()
    app.state.app_dependencies = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application; ``config`` defaults to the active configuration."""
    config = config or get_config()
    configure_logging(config)

    is_production = config.app.environment == "production"
    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app = FastAPI(
        title="Bookshelf GraphQL API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None,
    )
    app.state.config = config

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    limits = config.rate_limiter
    graphql_dependencies = (
        [
            Depends(
                rate_limit(
                    limits.requests,
                    limits.window_ms,
                    limits.per_endpoint,
                    limits.per_method,
                )
            )
        ]
        if limits.enabled
        else []
    )
    app.include_router(
        create_graphql_router(graphiql=config.graphql.graphiql and not is_production),
        prefix=config.graphql.path,
        dependencies=graphql_dependencies,
    )
    app.include_router(health_router)
    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # request logging happens in log_requests
    )
