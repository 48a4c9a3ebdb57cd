"""Logfire setup and library instrumentation.

Services and repositories log with logfire directly::

    logfire.info("Vote applied", post_id=str(post.id), vote_count=post.vote_count)

    with logfire.span("vote_service.cast_vote", post_id=str(post_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hunt.config import ObservabilitySettings, Settings

# Polled by load balancers; tracing it is noise
UNTRACED_URLS = "/health"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry goes to the Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise send only when a token
    is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry; without it
    everything goes to the console only.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    options: dict[str, Any] = {
        "service_name": "hunt-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Headers are not captured: ``Authorization`` carries bearer tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound calls to the object storage service."""
    logfire.instrument_httpx()
