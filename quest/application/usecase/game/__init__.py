"""Game use cases."""

from .create_game import CreateGameRequest, CreateGameResponse, CreateGameUseCase
from .get_game import GetGameRequest, GetGameResponse, GetGameUseCase
from .items import GameItem, PlatformItem, TagItem
from .list_games import (
    ListGamesRequest,
    ListGamesResponse,
    ListGamesUseCase,
    SearchGamesRequest,
    SearchGamesUseCase,
)

__all__ = [
    "CreateGameRequest",
    "CreateGameResponse",
    "CreateGameUseCase",
    "GameItem",
    "GetGameRequest",
    "GetGameResponse",
    "GetGameUseCase",
    "ListGamesRequest",
    "ListGamesResponse",
    "ListGamesUseCase",
    "PlatformItem",
    "SearchGamesRequest",
    "SearchGamesUseCase",
    "TagItem",
]
