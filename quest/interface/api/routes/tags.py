"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from quest.application.usecase.catalog import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
) -> ListTagsResponse:
    """List all tags alphabetically.

    Example:
        GET /tags

        Response:
        {
            "tags": [
                {"id": "...", "name": "Metroidvania", "category": "genre"},
                {"id": "...", "name": "Souls-like", "category": "gameplay"}
            ]
        }
    """
    return await list_tags_use_case.execute()


@router.post("", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest,
    create_tag_use_case: FromDishka[CreateTagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateTagResponse:
    require_actor(jwt_service, auth_token)
    return await create_tag_use_case.execute(request)
