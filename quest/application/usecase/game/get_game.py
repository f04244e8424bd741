"""Get game use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.game.items import GameItem, PlatformItem, TagItem
from quest.domain.service import GameService
from quest.domain.value import GameId


class GetGameRequest(BaseModel):
    """Get game request."""

    game_id: UUID


class GetGameResponse(GameItem):
    """Game with platforms and tags."""

    platforms: list[PlatformItem]
    tags: list[TagItem]


class GetGameUseCase:
    """Use case for viewing one game."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self, request: GetGameRequest) -> GetGameResponse:
        """Raises NotFoundError if the game does not exist."""
        game, platforms, tags = await self.game_service.get_game_details(
            GameId(request.game_id)
        )
        return GetGameResponse(
            **GameItem.from_game(game).model_dump(),
            platforms=[PlatformItem.from_platform(p) for p in platforms],
            tags=[TagItem.from_tag(t) for t in tags],
        )
