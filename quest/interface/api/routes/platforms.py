"""Platform routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from quest.application.usecase.catalog import (
    CreatePlatformRequest,
    CreatePlatformResponse,
    CreatePlatformUseCase,
    ListPlatformsResponse,
    ListPlatformsUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/platforms", tags=["platforms"], route_class=DishkaRoute)


@router.get("", response_model=ListPlatformsResponse)
async def list_platforms(
    list_platforms_use_case: FromDishka[ListPlatformsUseCase],
) -> ListPlatformsResponse:
    """List all platforms alphabetically."""
    return await list_platforms_use_case.execute()


@router.post(
    "", response_model=CreatePlatformResponse, status_code=status.HTTP_201_CREATED
)
async def create_platform(
    request: CreatePlatformRequest,
    create_platform_use_case: FromDishka[CreatePlatformUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePlatformResponse:
    """Create a platform. Names are unique (409 on a duplicate)."""
    require_actor(jwt_service, auth_token)
    return await create_platform_use_case.execute(request)
