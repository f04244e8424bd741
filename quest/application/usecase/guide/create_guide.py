"""Create guide use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.base import BaseUseCase
from quest.domain.service import GuideService
from quest.domain.value import GameId, UserId


class CreateGuideRequest(BaseModel):
    """Create guide request."""

    user_id: UUID  # From authenticated user
    game_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    map_image_url: str | None = Field(default=None, max_length=2048)


class CreateGuideResponse(BaseModel):
    """Id of the created guide."""

    id: str


class CreateGuideUseCase(BaseUseCase):
    """Use case for writing a guide."""

    def __init__(self, guide_service: GuideService) -> None:
        """Initialize create guide use case.

        Args:
            guide_service: Guide domain service
        """
        self.guide_service = guide_service

    async def execute(self, request: CreateGuideRequest) -> CreateGuideResponse:
        """Execute create guide flow.

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the author already has a guide for the game
        """
        with logfire.span(
            "create_guide.execute",
            user_id=str(request.user_id),
            game_id=str(request.game_id),
        ):
            guide = await self.guide_service.create_guide(
                user_id=UserId(request.user_id),
                game_id=GameId(request.game_id),
                title=request.title,
                description=request.description,
                map_image_url=request.map_image_url,
            )
            return CreateGuideResponse(id=str(guide.id))
