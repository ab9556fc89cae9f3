"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.bookshelf.api.http.app_data import ApplicationDependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is serving requests."""
    return {"status": "healthy", "service": "bookshelf"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe.

    Returns 200 with store sizes once startup has built the catalog stores,
    503 before that.
    """
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    if app_deps is None:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "checks": {"catalog": "unavailable"}},
        )

    return {
        "status": "ready",
        "environment": request.app.state.config.app.environment,
        "checks": {
            "catalog": {
                "status": "healthy",
                "books": app_deps.book_repository.count(),
                "authors": app_deps.author_repository.count(),
            }
        },
    }
