"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from tally.config import Settings
from tally.util.observability import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report with the deployed build."""

    status: str
    service: str
    environment: str
    version: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the API process is up.

    Does not touch the vote store, so a database outage still reports healthy.
    """
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        environment=settings.environment,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        timestamp=datetime.now(),
    )
