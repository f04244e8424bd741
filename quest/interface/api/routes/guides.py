"""Guide and map marker routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from quest.application.usecase.guide import (
    AddMapMarkerRequest,
    AddMapMarkerResponse,
    AddMapMarkerUseCase,
    CreateGuideRequest,
    CreateGuideResponse,
    CreateGuideUseCase,
    DeleteMapMarkerRequest,
    DeleteMapMarkerResponse,
    DeleteMapMarkerUseCase,
    GetGuideRequest,
    GetGuideResponse,
    GetGuideUseCase,
    ListGuidesRequest,
    ListGuidesResponse,
    ListGuidesUseCase,
    UpdateGuideRequest,
    UpdateGuideResponse,
    UpdateGuideUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(tags=["guides"], route_class=DishkaRoute)


class CreateGuideAPIRequest(BaseModel):
    """API request for writing a guide."""

    game_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    map_image_url: str | None = Field(default=None, max_length=2048)


class UpdateGuideAPIRequest(BaseModel):
    """API request for editing a guide. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    map_image_url: str | None = Field(default=None, max_length=2048)


class AddMarkerAPIRequest(BaseModel):
    """API request for placing a marker on a guide's map."""

    title: str = Field(min_length=1, max_length=255)
    position_x: int
    position_y: int
    achievement_id: UUID | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    quick_tip: str | None = None


@router.get("/games/{game_id}/guides", response_model=ListGuidesResponse)
async def list_game_guides(
    game_id: UUID,
    list_guides_use_case: FromDishka[ListGuidesUseCase],
) -> ListGuidesResponse:
    """List the latest guide versions for a game, most upvoted first."""
    return await list_guides_use_case.execute(ListGuidesRequest(game_id=game_id))


@router.get("/guides/{guide_id}", response_model=GetGuideResponse)
async def get_guide(
    guide_id: UUID,
    get_guide_use_case: FromDishka[GetGuideUseCase],
) -> GetGuideResponse:
    """Read a guide with its markers. Every read counts one view."""
    return await get_guide_use_case.execute(GetGuideRequest(guide_id=guide_id))


@router.post(
    "/guides", response_model=CreateGuideResponse, status_code=status.HTTP_201_CREATED
)
async def create_guide(
    request: CreateGuideAPIRequest,
    create_guide_use_case: FromDishka[CreateGuideUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateGuideResponse:
    actor = require_actor(jwt_service, auth_token)
    return await create_guide_use_case.execute(
        CreateGuideRequest(user_id=actor.user_id, **request.model_dump())
    )


@router.patch("/guides/{guide_id}", response_model=UpdateGuideResponse)
async def update_guide(
    guide_id: UUID,
    request: UpdateGuideAPIRequest,
    update_guide_use_case: FromDishka[UpdateGuideUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateGuideResponse:
    """Edit a guide in place; its version goes up by one."""
    actor = require_actor(jwt_service, auth_token)
    return await update_guide_use_case.execute(
        UpdateGuideRequest(actor=actor, guide_id=guide_id, **request.model_dump())
    )


@router.post(
    "/guides/{guide_id}/markers",
    response_model=AddMapMarkerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_marker(
    guide_id: UUID,
    request: AddMarkerAPIRequest,
    add_map_marker_use_case: FromDishka[AddMapMarkerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddMapMarkerResponse:
    actor = require_actor(jwt_service, auth_token)
    return await add_map_marker_use_case.execute(
        AddMapMarkerRequest(actor=actor, guide_id=guide_id, **request.model_dump())
    )


@router.delete("/markers/{marker_id}", response_model=DeleteMapMarkerResponse)
async def delete_marker(
    marker_id: UUID,
    delete_map_marker_use_case: FromDishka[DeleteMapMarkerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteMapMarkerResponse:
    actor = require_actor(jwt_service, auth_token)
    return await delete_map_marker_use_case.execute(
        DeleteMapMarkerRequest(actor=actor, marker_id=marker_id)
    )
