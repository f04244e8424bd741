"""Platform use cases."""

from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.game.items import PlatformItem
from quest.domain.service import GameService


class CreatePlatformRequest(BaseModel):
    """Create platform request."""

    name: str = Field(min_length=1, max_length=100)
    icon: str | None = Field(default=None, max_length=50)


class CreatePlatformResponse(BaseModel):
    """Id of the created platform."""

    id: str


class ListPlatformsResponse(BaseModel):
    """List platforms response."""

    platforms: list[PlatformItem]


class ListPlatformsUseCase:
    """Use case for listing platforms."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self) -> ListPlatformsResponse:
        platforms = await degrade_to_empty(
            "list_platforms", self.game_service.list_platforms()
        )
        return ListPlatformsResponse(
            platforms=[PlatformItem.from_platform(p) for p in platforms]
        )


class CreatePlatformUseCase:
    """Use case for adding a platform."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self, request: CreatePlatformRequest) -> CreatePlatformResponse:
        """Raises AlreadyExistsError if the name is taken."""
        platform = await self.game_service.create_platform(request.name, request.icon)
        return CreatePlatformResponse(id=str(platform.id))
