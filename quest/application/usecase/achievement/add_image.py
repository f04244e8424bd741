"""Add achievement image use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import AchievementService
from quest.domain.value import AchievementId, UserId


class AddAchievementImageRequest(BaseModel):
    """Add achievement image request."""

    user_id: UUID  # From authenticated user
    achievement_id: UUID
    image_url: str = Field(min_length=1, max_length=2048)
    caption: str | None = Field(default=None, max_length=500)


class AddAchievementImageResponse(BaseModel):
    """Id of the stored image."""

    id: str


class AddAchievementImageUseCase:
    """Use case for attaching an image to an achievement."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(self, request: AddAchievementImageRequest) -> AddAchievementImageResponse:
        image = await self.achievement_service.add_image(
            UserId(request.user_id),
            AchievementId(request.achievement_id),
            request.image_url,
            request.caption,
        )
        return AddAchievementImageResponse(id=str(image.id))
