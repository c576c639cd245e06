"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from tally.interface.api.routes import health, votes
from tally.util.di.container import create_container, setup_di
from tally.util.observability import SERVICE_VERSION, instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Releases APP-scoped resources such as the database engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container by default

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Tally API",
        description="Up/down votes on comments, with anonymous voting and downvote moderation thresholds",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
