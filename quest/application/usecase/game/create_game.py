"""Create game use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.domain.service import GameService
from quest.domain.value import PlatformId, TagId


class CreateGameRequest(BaseModel):
    """Create game request."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    cover_image_url: str | None = None
    release_date: datetime | None = None
    developer: str | None = Field(default=None, max_length=255)
    publisher: str | None = Field(default=None, max_length=255)
    platform_ids: list[UUID] = Field(default_factory=list)
    tag_ids: list[UUID] = Field(default_factory=list)


class CreateGameResponse(BaseModel):
    """Id of the created game."""

    id: str


class CreateGameUseCase:
    """Use case for adding a game to the catalogue."""

    def __init__(self, game_service: GameService) -> None:
        """Initialize create game use case.

        Args:
            game_service: Game domain service
        """
        self.game_service = game_service

    async def execute(self, request: CreateGameRequest) -> CreateGameResponse:
        """Execute create game flow.

        Args:
            request: Create game request

        Returns:
            The new game id; its aggregates start at zero

        Raises:
            ValidationError: If a platform or tag id is unknown
        """
        with logfire.span("create_game.execute", title=request.title):
            game = await self.game_service.create_game(
                title=request.title,
                description=request.description,
                cover_image_url=request.cover_image_url,
                release_date=request.release_date,
                developer=request.developer,
                publisher=request.publisher,
                platform_ids=[PlatformId(pid) for pid in request.platform_ids],
                tag_ids=[TagId(tid) for tid in request.tag_ids],
            )
            return CreateGameResponse(id=str(game.id))
