"""Get achievement use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.achievement.items import (
    AchievementImageItem,
    AchievementItem,
)
from quest.domain.service import AchievementService
from quest.domain.value import AchievementId


class GetAchievementRequest(BaseModel):
    """Get achievement request."""

    achievement_id: UUID


class GetAchievementResponse(AchievementItem):
    """Achievement with its images, most upvoted first."""

    images: list[AchievementImageItem]


class GetAchievementUseCase:
    """Use case for viewing one achievement."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(self, request: GetAchievementRequest) -> GetAchievementResponse:
        """Raises NotFoundError if the achievement does not exist."""
        achievement_id = AchievementId(request.achievement_id)
        achievement = await self.achievement_service.get_achievement(achievement_id)
        images = await self.achievement_service.get_images(achievement_id)
        return GetAchievementResponse(
            **AchievementItem.from_achievement(achievement).model_dump(),
            images=[AchievementImageItem.from_image(i) for i in images],
        )
