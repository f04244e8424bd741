"""Get and list guide use cases."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.guide.items import GuideItem, MapMarkerItem
from quest.domain.service import GuideService
from quest.domain.value import GameId, GuideId


class GetGuideRequest(BaseModel):
    """Get guide request."""

    guide_id: UUID


class GetGuideResponse(GuideItem):
    """Guide with its map markers."""

    markers: list[MapMarkerItem]


class ListGuidesRequest(BaseModel):
    """List guides request."""

    game_id: UUID


class ListGuidesResponse(BaseModel):
    """Latest guides for a game, most upvoted first."""

    guides: list[GuideItem]


class GetGuideUseCase:
    """Use case for reading a guide.

    Each read counts as one view.
    """

    def __init__(self, guide_service: GuideService) -> None:
        self.guide_service = guide_service

    async def execute(self, request: GetGuideRequest) -> GetGuideResponse:
        """Raises NotFoundError if the guide does not exist."""
        guide, markers = await self.guide_service.view_guide(GuideId(request.guide_id))
        return GetGuideResponse(
            **GuideItem.from_guide(guide).model_dump(),
            markers=[MapMarkerItem.from_marker(m) for m in markers],
        )


class ListGuidesUseCase:
    """Use case for listing the guides of a game."""

    def __init__(self, guide_service: GuideService) -> None:
        self.guide_service = guide_service

    async def execute(self, request: ListGuidesRequest) -> ListGuidesResponse:
        guides = await degrade_to_empty(
            "list_guides", self.guide_service.get_game_guides(GameId(request.game_id))
        )
        return ListGuidesResponse(guides=[GuideItem.from_guide(g) for g in guides])
