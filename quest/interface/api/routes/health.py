"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from quest.config import Settings
from quest.persistence.database import StorageClient, StorageState

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    storage: StorageState
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    storage: FromDishka[StorageClient],
) -> HealthResponse:
    """Report liveness and storage state.

    The service answers 200 even while storage is down; ``status`` is then
    ``degraded`` and list reads come back empty.
    """
    return HealthResponse(
        status="healthy" if storage.is_healthy else "degraded",
        storage=storage.state,
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )
