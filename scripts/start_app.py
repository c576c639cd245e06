#!/usr/bin/env python3
"""Serve the vote API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from tally.config import Settings
from tally.util.observability import configure_logfire

# Containers need to accept connections from outside localhost
BIND_HOST = "0.0.0.0"


def main() -> int:
    """Configure Logfire, then hand over to uvicorn."""
    settings = Settings()
    configure_logfire(settings)

    host = BIND_HOST if settings.environment != "development" else settings.host
    logfire.info("Starting vote API", host=host, port=settings.port)

    try:
        uvicorn.run(
            "tally.interface.api.app:create_app",
            factory=True,
            host=host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Vote API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
