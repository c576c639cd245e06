"""Logfire setup for the vote service.

Services log through logfire directly, with structured attributes:

    logfire.info("Vote saved", vote_id=vote.id, comment_id=vote.comment_id)

and wrap multi-step operations in spans named after the method:

    with logfire.span("vote_service.save_vote", comment_id=comment_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tally.config import ObservabilitySettings, Settings

SERVICE_NAME = "tally-backend"
SERVICE_VERSION = "0.1.0"


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    # An explicit flag beats token presence; without either, stay local
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once at process start.

    Telemetry only leaves the process when OBSERVABILITY__LOGFIRE_TOKEN is
    set, or when OBSERVABILITY__SEND_TO_LOGFIRE forces it. Otherwise spans
    and logs go to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = _send_to_logfire(observability)

    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    # Voters are often anonymous, so the client host is the main request clue
    mapped = dict(attributes)
    mapped["method"] = getattr(request, "method", None)
    url = getattr(request, "url", None)
    if url is not None:
        mapped["path"] = url.path
    client = getattr(request, "client", None)
    if client:
        mapped["client_host"] = client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.debug("FastAPI instrumented", title=app.title)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries run on the vote store engine.

    Args:
        engine: SQLAlchemy async engine, instrumented through its sync core
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented", dialect=engine.dialect.name)
