"""List and search games use cases."""

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.game.items import GameItem
from quest.domain.service import GameService


class ListGamesRequest(BaseModel):
    """List games request."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class SearchGamesRequest(BaseModel):
    """Search games request."""

    query: str = Field(min_length=1, max_length=255)
    limit: int = Field(default=20, ge=1, le=100)


class ListGamesResponse(BaseModel):
    """List of games."""

    games: list[GameItem]


class ListGamesUseCase:
    """Use case for browsing games, newest first."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self, request: ListGamesRequest) -> ListGamesResponse:
        with logfire.span("list_games.execute", limit=request.limit, offset=request.offset):
            games = await degrade_to_empty(
                "list_games",
                self.game_service.list_games(limit=request.limit, offset=request.offset),
            )
            return ListGamesResponse(games=[GameItem.from_game(g) for g in games])


class SearchGamesUseCase:
    """Use case for searching games by title."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self, request: SearchGamesRequest) -> ListGamesResponse:
        games = await degrade_to_empty(
            "search_games",
            self.game_service.search_games(request.query, limit=request.limit),
        )
        return ListGamesResponse(games=[GameItem.from_game(g) for g in games])
