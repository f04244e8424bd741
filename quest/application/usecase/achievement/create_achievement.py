"""Create achievement use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.domain.service import AchievementService
from quest.domain.value import GameId


class CreateAchievementRequest(BaseModel):
    """Create achievement request."""

    game_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    icon_url: str | None = None
    points: int = Field(default=0, ge=0)
    estimated_time: int | None = Field(default=None, ge=0)
    is_missable: bool = False
    is_buggy: bool = False
    is_grindy: bool = False
    is_easy: bool = False
    text_guide: str | None = None


class CreateAchievementResponse(BaseModel):
    """Id of the created achievement."""

    id: str


class CreateAchievementUseCase:
    """Use case for adding an achievement to a game."""

    def __init__(self, achievement_service: AchievementService) -> None:
        """Initialize create achievement use case.

        Args:
            achievement_service: Achievement domain service
        """
        self.achievement_service = achievement_service

    async def execute(self, request: CreateAchievementRequest) -> CreateAchievementResponse:
        """Execute create achievement flow.

        Raises:
            NotFoundError: If the game does not exist
        """
        with logfire.span("create_achievement.execute", game_id=str(request.game_id)):
            achievement = await self.achievement_service.create_achievement(
                game_id=GameId(request.game_id),
                **request.model_dump(exclude={"game_id"}),
            )
            return CreateAchievementResponse(id=str(achievement.id))
