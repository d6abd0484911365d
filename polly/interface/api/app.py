"""FastAPI application."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from polly.config import Settings
from polly.domain.service import RateLimiter
from polly.interface.api.errors import register_exception_handlers
from polly.interface.api.middleware import SecurityHeadersMiddleware
from polly.interface.api.routes import admin, auth, health, polls, votes
from polly.util.di.container import create_container, setup_di
from polly.util.env import ensure_platform_configured
from polly.util.observability import instrument_fastapi, instrument_httpx
from polly.util.sweeper import run_periodic_sweep


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the rate limit sweeper for the lifetime of the app."""
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)
    rate_limiter = await container.get(RateLimiter)

    sweeper = asyncio.create_task(
        run_periodic_sweep(rate_limiter, settings.rate_limit.sweep_interval_seconds)
    )
    try:
        yield
    finally:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
        await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in production
    start_app.py handles this.

    Args:
        container: DI container to use; the production container when None

    Raises:
        ConfigurationError: In production, if platform settings are invalid
    """
    settings = Settings()
    ensure_platform_configured(settings)

    instrument_httpx()

    app_instance = FastAPI(
        title="Polly API",
        description="Backend API for Polly - create polls, share them and vote",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(SecurityHeadersMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=[
            "Retry-After",
            "X-RateLimit-Limit",
            "X-RateLimit-Remaining",
            "X-RateLimit-Reset",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(polls.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(admin.router)

    return app_instance
