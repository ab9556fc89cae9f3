"""Unit tests for the in-memory rate limiter."""

import asyncio

import pytest
from fastapi import HTTPException

from src.bookshelf.api.http.middleware.limiter import (
    DefaultLocalRateLimiter,
    close_rate_limiter,
    configure_rate_limiter,
    get_rate_limiter,
    rate_limit,
)
from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import with_context


class TestDefaultLocalRateLimiter:
    @pytest.mark.asyncio
    async def test_allows_requests_within_limit(self, request_factory):
        limiter = DefaultLocalRateLimiter(2, 10_000, True, True)
        request = request_factory()

        await limiter(request)
        await limiter(request)

    @pytest.mark.asyncio
    async def test_blocks_requests_when_limit_exceeded(self, request_factory):
        limiter = DefaultLocalRateLimiter(2, 5_000, True, True)
        request = request_factory()

        await limiter(request)
        await limiter(request)
        with pytest.raises(HTTPException) as exc_info:
            await limiter(request)

        assert exc_info.value.status_code == 429
        assert "too many" in exc_info.value.detail.lower()
        assert int(exc_info.value.headers["Retry-After"]) <= 5

    @pytest.mark.asyncio
    async def test_window_resets(self, request_factory):
        limiter = DefaultLocalRateLimiter(1, 200, True, True)
        request = request_factory()

        await limiter(request)
        await asyncio.sleep(0.3)
        await limiter(request)

    @pytest.mark.asyncio
    async def test_clients_are_tracked_separately(self, request_factory):
        limiter = DefaultLocalRateLimiter(1, 10_000, True, True)

        await limiter(request_factory(client_host="10.0.0.1"))
        await limiter(request_factory(client_host="10.0.0.2"))

    @pytest.mark.asyncio
    async def test_per_endpoint_keys(self, request_factory):
        limiter = DefaultLocalRateLimiter(1, 10_000, True, False)

        await limiter(request_factory(path="/graphql"))
        await limiter(request_factory(path="/health"))
        with pytest.raises(HTTPException):
            await limiter(request_factory(path="/graphql", method="GET"))

    @pytest.mark.asyncio
    async def test_cleanup_forgets_hits(self, request_factory):
        limiter = DefaultLocalRateLimiter(1, 10_000, False, False)
        request = request_factory()

        await limiter(request)
        await limiter.cleanup()
        await limiter(request)


class TestLimiterConfiguration:
    @pytest.fixture(autouse=True)
    def reset_limiter(self):
        configure_rate_limiter()
        yield
        configure_rate_limiter()

    def test_get_rate_limiter_is_cached_per_quota(self):
        assert get_rate_limiter(5, 1000) is get_rate_limiter(5, 1000)
        assert get_rate_limiter(5, 1000) is not get_rate_limiter(6, 1000)

    def test_reconfiguring_invalidates_cache(self):
        before = get_rate_limiter(5, 1000)

        configure_rate_limiter()

        assert get_rate_limiter(5, 1000) is not before

    def test_custom_factory(self):
        calls = []

        def factory(requests, window_ms, per_endpoint, per_method):
            calls.append((requests, window_ms))
            return DefaultLocalRateLimiter(requests, window_ms, per_endpoint, per_method)

        configure_rate_limiter(factory)
        get_rate_limiter(3, 500)

        assert calls == [(3, 500)]

    def test_defaults_come_from_config(self):
        override = ConfigData()
        override.rate_limiter.requests = 1

        with with_context(override):
            limiter = get_rate_limiter()

        assert isinstance(limiter, DefaultLocalRateLimiter)
        assert limiter._times == 1

    @pytest.mark.asyncio
    async def test_explicit_key_scoping_ignores_context(self, request_factory):
        dependency = rate_limit(
            requests=1, window_ms=10_000, per_endpoint=True, per_method=False
        )
        override = ConfigData()
        override.rate_limiter.per_method = True

        with with_context(override):
            await dependency(request_factory(method="POST"))
            with pytest.raises(HTTPException):
                await dependency(request_factory(method="GET"))

    @pytest.mark.asyncio
    async def test_rate_limit_dependency(self, request_factory):
        dependency = rate_limit(requests=1, window_ms=10_000)
        request = request_factory()

        await dependency(request)
        with pytest.raises(HTTPException):
            await dependency(request)

    @pytest.mark.asyncio
    async def test_unconfigured_limiter_raises(self):
        await close_rate_limiter()

        with pytest.raises(RuntimeError, match="not configured"):
            get_rate_limiter(9, 9)
