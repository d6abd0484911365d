"""Logfire setup for the API and its scripts.

Everything the app records goes through ``logfire``: ``logfire.info`` for
events, ``logfire.span`` around repository and platform calls. This module
only configures where that output ends up.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from polly.config import ObservabilitySettings, Settings

SERVICE_NAME = "polly-api"

# Values logged under these keys are redacted before export
SCRUBBED_KEYS = ["auth_token", "access_token", "refresh_token", "anon_key"]


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit setting wins, otherwise export only when a token is present."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the current environment.

    Console output is always on; export to logfire is controlled by
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` and ``OBSERVABILITY__LOGFIRE_TOKEN``.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token or None,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_KEYS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, without headers (they carry the session cookie)."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace poll and vote queries on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to the auth platform."""
    logfire.instrument_httpx()
