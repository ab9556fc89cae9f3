"""Rate limiting helpers used by the HTTP layer."""

from __future__ import annotations

import asyncio
import time
from collections import defaultdict, deque
from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import Any

from fastapi import HTTPException
from loguru import logger
from starlette.requests import HTTPConnection

from src.bookshelf.runtime.context import get_config

RateLimiterType = Callable[[HTTPConnection], Awaitable[Any]]

RateLimiterFactory = Callable[
    [int, int, bool, bool], RateLimiterType
]  # (requests, window_ms, per_endpoint, per_method) -> limiter

_rate_limiter_factory: RateLimiterFactory | None = None
_local_limiters: list[DefaultLocalRateLimiter] = []
_factory_counter: int = 0  # bumped on reconfiguration to invalidate the cache


class DefaultLocalRateLimiter:
    """Sliding-window limiter keyed by client address, route and method."""

    def __init__(
        self, times: int, milliseconds: int, per_endpoint: bool, per_method: bool
    ) -> None:
        self._hits: defaultdict[str, deque[float]] = defaultdict(deque)
        self._lock = asyncio.Lock()
        self._times = times
        self._seconds = milliseconds / 1000
        self._per_endpoint = per_endpoint
        self._per_method = per_method
        self._last_cleanup = time.monotonic()
        self._cleanup_interval = 60.0

    async def __call__(self, connection: HTTPConnection) -> None:
        key = self._make_key(connection)
        await self._throttle(key)

    def _make_key(self, connection: HTTPConnection) -> str:
        client_host = connection.client.host if connection.client else "anonymous"
        parts = [f"ip:{client_host}"]

        if self._per_method:
            parts.append(connection.scope.get("method", "WEBSOCKET"))
        if self._per_endpoint:
            route = connection.scope.get("route")
            template = getattr(route, "path", None)
            parts.append((template or connection.url.path).rstrip("/"))
        return ":".join(parts)

    def _cleanup_old_keys(self, now: float) -> None:
        """Drop keys whose hits all fell out of the window."""
        if now - self._last_cleanup < self._cleanup_interval:
            return
        self._last_cleanup = now
        stale = [
            key
            for key, hits in self._hits.items()
            if not hits or hits[-1] <= now - self._seconds
        ]
        for key in stale:
            del self._hits[key]

    async def _throttle(self, key: str) -> None:
        now = time.monotonic()
        window_start = now - self._seconds
        async with self._lock:
            self._cleanup_old_keys(now)
            hits = self._hits[key]
            while hits and hits[0] <= window_start:
                hits.popleft()
            if len(hits) >= self._times:
                retry_after = max(0, int(self._seconds - (now - hits[0])))
                logger.bind(limiter_key=key).warning("rate_limit.exceeded")
                raise HTTPException(
                    status_code=429,
                    detail="Too Many Requests",
                    headers={"Retry-After": str(retry_after)},
                )
            hits.append(now)

    async def cleanup(self) -> None:
        async with self._lock:
            tracked = len(self._hits)
            self._hits.clear()
        logger.debug("Cleaned up local rate limiter with {} tracked keys", tracked)


def _local_rate_limiter_factory(
    times: int, milliseconds: int, per_endpoint: bool, per_method: bool
) -> RateLimiterType:
    limiter = DefaultLocalRateLimiter(times, milliseconds, per_endpoint, per_method)
    _local_limiters.append(limiter)
    return limiter


def configure_rate_limiter(limiter_factory: RateLimiterFactory | None = None) -> None:
    """Select the limiter implementation; defaults to the in-memory limiter."""
    global _rate_limiter_factory, _factory_counter

    _create_rate_limiter.cache_clear()
    _factory_counter += 1
    _rate_limiter_factory = limiter_factory or _local_rate_limiter_factory
    logger.info(
        "Rate limiter configured: {}",
        getattr(_rate_limiter_factory, "__name__", repr(_rate_limiter_factory)),
    )


@lru_cache(maxsize=100)
def _create_rate_limiter(
    requests: int,
    window_ms: int,
    per_endpoint: bool,
    per_method: bool,
    factory_id: int,
) -> RateLimiterType:
    if _rate_limiter_factory is None:
        raise RuntimeError("Rate limiter not configured")
    return _rate_limiter_factory(requests, window_ms, per_endpoint, per_method)


def get_rate_limiter(
    requests: int | None = None,
    window_ms: int | None = None,
    per_endpoint: bool | None = None,
    per_method: bool | None = None,
) -> RateLimiterType:
    """Get a limiter for the given quota, falling back to the configured one."""
    config = get_config().rate_limiter
    return _create_rate_limiter(
        requests if requests is not None else config.requests,
        window_ms if window_ms is not None else config.window_ms,
        per_endpoint if per_endpoint is not None else config.per_endpoint,
        per_method if per_method is not None else config.per_method,
        _factory_counter,
    )


def rate_limit(
    requests: int | None = None,
    window_ms: int | None = None,
    per_endpoint: bool | None = None,
    per_method: bool | None = None,
) -> RateLimiterType:
    """Return a dependency enforcing request quotas.

    Arguments left as ``None`` are read from the active configuration on
    each request.
    """

    async def dependency(connection: HTTPConnection) -> None:
        limiter = get_rate_limiter(requests, window_ms, per_endpoint, per_method)
        await limiter(connection)

    return dependency


async def close_rate_limiter() -> None:
    """Release limiter state and forget the configured factory."""
    global _rate_limiter_factory

    _create_rate_limiter.cache_clear()
    if _local_limiters:
        logger.info("Cleaning up {} local rate limiter instances", len(_local_limiters))
        for limiter in _local_limiters:
            await limiter.cleanup()
        _local_limiters.clear()
    _rate_limiter_factory = None
