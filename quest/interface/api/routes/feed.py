"""Home feed route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from quest.application.usecase.activity import (
    ActivityFeedRequest,
    ActivityFeedResponse,
    GetFeedUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/feed", tags=["feed"], route_class=DishkaRoute)


@router.get("", response_model=ActivityFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ActivityFeedResponse:
    """Activities of the caller and everyone they follow, newest first."""
    actor = require_actor(jwt_service, auth_token)
    return await get_feed_use_case.execute(
        ActivityFeedRequest(user_id=actor.user_id, limit=limit)
    )
