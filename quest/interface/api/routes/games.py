"""Game catalogue routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status

from quest.application.usecase.game import (
    CreateGameRequest,
    CreateGameResponse,
    CreateGameUseCase,
    GetGameRequest,
    GetGameResponse,
    GetGameUseCase,
    ListGamesRequest,
    ListGamesResponse,
    ListGamesUseCase,
    SearchGamesRequest,
    SearchGamesUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/games", tags=["games"], route_class=DishkaRoute)


@router.get("", response_model=ListGamesResponse)
async def list_games(
    list_games_use_case: FromDishka[ListGamesUseCase],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListGamesResponse:
    """List games, newest first."""
    return await list_games_use_case.execute(ListGamesRequest(limit=limit, offset=offset))


@router.get("/search", response_model=ListGamesResponse)
async def search_games(
    search_games_use_case: FromDishka[SearchGamesUseCase],
    q: str = Query(min_length=1, max_length=255),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListGamesResponse:
    """Case-insensitive title search."""
    return await search_games_use_case.execute(SearchGamesRequest(query=q, limit=limit))


@router.get("/{game_id}", response_model=GetGameResponse)
async def get_game(
    game_id: UUID,
    get_game_use_case: FromDishka[GetGameUseCase],
) -> GetGameResponse:
    """Get a game with its platforms and tags."""
    return await get_game_use_case.execute(GetGameRequest(game_id=game_id))


@router.post("", response_model=CreateGameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(
    request: CreateGameRequest,
    create_game_use_case: FromDishka[CreateGameUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateGameResponse:
    """Add a game to the catalogue, optionally linking platforms and tags.

    Example:
        POST /games
        {"title": "Hollow Knight", "developer": "Team Cherry",
         "platform_ids": ["..."], "tag_ids": ["..."]}
    """
    require_actor(jwt_service, auth_token)
    return await create_game_use_case.execute(request)
