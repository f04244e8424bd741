"""Update guide use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import GuideService
from quest.domain.value import Actor, GuideId


class UpdateGuideRequest(BaseModel):
    """Update guide request. Omitted fields are left unchanged."""

    actor: Actor
    guide_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    map_image_url: str | None = Field(default=None, max_length=2048)


class UpdateGuideResponse(BaseModel):
    """Update guide response."""

    success: bool


class UpdateGuideUseCase:
    """Use case for editing a guide."""

    def __init__(self, guide_service: GuideService) -> None:
        self.guide_service = guide_service

    async def execute(self, request: UpdateGuideRequest) -> UpdateGuideResponse:
        """Execute update guide flow.

        Raises:
            NotFoundError: If the guide does not exist
            NotAuthorizedError: If the actor does not own the guide
        """
        await self.guide_service.update_guide(
            request.actor,
            GuideId(request.guide_id),
            title=request.title,
            description=request.description,
            map_image_url=request.map_image_url,
        )
        return UpdateGuideResponse(success=True)
