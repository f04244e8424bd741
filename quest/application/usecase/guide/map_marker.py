"""Map marker use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import GuideService
from quest.domain.value import AchievementId, Actor, GuideId, MapMarkerId


class AddMapMarkerRequest(BaseModel):
    """Add map marker request."""

    actor: Actor
    guide_id: UUID
    title: str = Field(min_length=1, max_length=255)
    position_x: int
    position_y: int
    achievement_id: UUID | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    quick_tip: str | None = None


class AddMapMarkerResponse(BaseModel):
    """Id of the placed marker."""

    id: str


class DeleteMapMarkerRequest(BaseModel):
    """Delete map marker request."""

    actor: Actor
    marker_id: UUID


class DeleteMapMarkerResponse(BaseModel):
    """Delete map marker response."""

    success: bool


class AddMapMarkerUseCase:
    """Use case for placing a marker on a guide's map."""

    def __init__(self, guide_service: GuideService) -> None:
        self.guide_service = guide_service

    async def execute(self, request: AddMapMarkerRequest) -> AddMapMarkerResponse:
        marker = await self.guide_service.add_marker(
            request.actor,
            GuideId(request.guide_id),
            title=request.title,
            position_x=request.position_x,
            position_y=request.position_y,
            achievement_id=(
                AchievementId(request.achievement_id) if request.achievement_id else None
            ),
            description=request.description,
            image_url=request.image_url,
            quick_tip=request.quick_tip,
        )
        return AddMapMarkerResponse(id=str(marker.id))


class DeleteMapMarkerUseCase:
    """Use case for removing a map marker."""

    def __init__(self, guide_service: GuideService) -> None:
        self.guide_service = guide_service

    async def execute(self, request: DeleteMapMarkerRequest) -> DeleteMapMarkerResponse:
        await self.guide_service.delete_marker(request.actor, MapMarkerId(request.marker_id))
        return DeleteMapMarkerResponse(success=True)
