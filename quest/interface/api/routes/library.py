"""Library routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quest.application.usecase.library import (
    AddToLibraryRequest,
    AddToLibraryResponse,
    AddToLibraryUseCase,
    ListLibraryRequest,
    ListLibraryResponse,
    ListLibraryUseCase,
    RemoveLibraryEntryRequest,
    RemoveLibraryEntryResponse,
    RemoveLibraryEntryUseCase,
    UpdateLibraryEntryRequest,
    UpdateLibraryEntryResponse,
    UpdateLibraryEntryUseCase,
)
from quest.domain.service import JWTService
from quest.domain.value import LibraryStatus
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/library", tags=["library"], route_class=DishkaRoute)


class AddToLibraryAPIRequest(BaseModel):
    """API request for adding a game to the caller's library."""

    game_id: UUID
    status: LibraryStatus = LibraryStatus.BACKLOG


class UpdateLibraryEntryAPIRequest(BaseModel):
    """API request for editing a library entry. Omitted fields are unchanged."""

    status: LibraryStatus | None = None
    is_favorite: bool | None = None
    hours_played: int | None = Field(default=None, ge=0)
    personal_rating: int | None = Field(default=None, ge=1, le=10)


@router.get("", response_model=ListLibraryResponse)
async def list_library(
    list_library_use_case: FromDishka[ListLibraryUseCase],
    jwt_service: FromDishka[JWTService],
    user_id: UUID | None = None,
    status_filter: LibraryStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListLibraryResponse:
    """List a library, newest first.

    Without ``user_id`` the caller's own library is listed, which requires
    authentication.
    """
    if user_id is None:
        user_id = require_actor(jwt_service, auth_token).user_id
    return await list_library_use_case.execute(
        ListLibraryRequest(user_id=user_id, status=status_filter)
    )


@router.post("", response_model=AddToLibraryResponse, status_code=status.HTTP_201_CREATED)
async def add_to_library(
    request: AddToLibraryAPIRequest,
    add_to_library_use_case: FromDishka[AddToLibraryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddToLibraryResponse:
    """Add a game to the caller's library.

    A second add of the same game is rejected with 409.
    """
    actor = require_actor(jwt_service, auth_token)
    return await add_to_library_use_case.execute(
        AddToLibraryRequest(
            user_id=actor.user_id, game_id=request.game_id, status=request.status
        )
    )


@router.patch("/{entry_id}", response_model=UpdateLibraryEntryResponse)
async def update_library_entry(
    entry_id: UUID,
    request: UpdateLibraryEntryAPIRequest,
    update_library_entry_use_case: FromDishka[UpdateLibraryEntryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateLibraryEntryResponse:
    actor = require_actor(jwt_service, auth_token)
    return await update_library_entry_use_case.execute(
        UpdateLibraryEntryRequest(actor=actor, entry_id=entry_id, **request.model_dump())
    )


@router.delete("/{entry_id}", response_model=RemoveLibraryEntryResponse)
async def remove_library_entry(
    entry_id: UUID,
    remove_library_entry_use_case: FromDishka[RemoveLibraryEntryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveLibraryEntryResponse:
    actor = require_actor(jwt_service, auth_token)
    return await remove_library_entry_use_case.execute(
        RemoveLibraryEntryRequest(actor=actor, entry_id=entry_id)
    )
