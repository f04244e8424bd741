"""Guide domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import AlreadyExistsError, NotFoundError
from quest.domain.model import Guide, MapMarker
from quest.domain.repository import GameRepository, GuideRepository, MapMarkerRepository
from quest.domain.value import (
    AchievementId,
    ActivityType,
    Actor,
    GameId,
    GuideId,
    MapMarkerId,
    UserId,
)

from .activity_service import ActivityService
from .base import Service, ensure_can_modify

ALREADY_HAS_GUIDE = "You already have a guide for this game"


class GuideService(Service):
    """Domain service for guides and their map markers."""

    def __init__(
        self,
        guide_repository: GuideRepository,
        map_marker_repository: MapMarkerRepository,
        game_repository: GameRepository,
        activity_service: ActivityService,
    ) -> None:
        self.guide_repository = guide_repository
        self.map_marker_repository = map_marker_repository
        self.game_repository = game_repository
        self.activity_service = activity_service

    async def create_guide(
        self,
        user_id: UserId,
        game_id: GameId,
        title: str,
        description: Optional[str] = None,
        map_image_url: Optional[str] = None,
    ) -> Guide:
        """Create a guide for a game.

        An author keeps one latest guide per game and edits it in place.

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the author already has a guide for the game
        """
        with logfire.span(
            "guide_service.create_guide", user_id=str(user_id), game_id=str(game_id)
        ):
            if not await self.game_repository.find_by_id(game_id):
                raise NotFoundError("Game", str(game_id))

            if await self.guide_repository.find_latest_by_user_and_game(user_id, game_id):
                raise AlreadyExistsError(ALREADY_HAS_GUIDE)

            now = datetime.now()
            guide = Guide(
                id=GuideId(uuid4()),
                game_id=game_id,
                user_id=user_id,
                title=title,
                description=description,
                map_image_url=map_image_url,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.guide_repository.save(guide)
            except IntegrityError:
                raise AlreadyExistsError(ALREADY_HAS_GUIDE)

            await self.activity_service.log(
                user_id, ActivityType.GUIDE, saved.id, metadata={"game_id": game_id}
            )
            return saved

    async def get_guide(self, guide_id: GuideId) -> Guide:
        """Get a guide by ID.

        Raises:
            NotFoundError: If the guide does not exist
        """
        guide = await self.guide_repository.find_by_id(guide_id)
        if not guide:
            raise NotFoundError("Guide", str(guide_id))
        return guide

    async def view_guide(self, guide_id: GuideId) -> tuple[Guide, list[MapMarker]]:
        """Read a guide with its markers, counting one view."""
        with logfire.span("guide_service.view_guide", guide_id=str(guide_id)):
            await self.get_guide(guide_id)
            await self.guide_repository.increment_views(guide_id)
            guide = await self.get_guide(guide_id)
            markers = await self.map_marker_repository.find_by_guide(guide_id)
            return guide, markers

    async def get_game_guides(self, game_id: GameId) -> list[Guide]:
        return await self.guide_repository.find_latest_by_game(game_id)

    async def update_guide(
        self,
        actor: Actor,
        guide_id: GuideId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        map_image_url: Optional[str] = None,
    ) -> Guide:
        """Edit a guide in place and bump its version.

        Raises:
            NotFoundError: If the guide does not exist
            NotAuthorizedError: If the actor does not own the guide
        """
        with logfire.span("guide_service.update_guide", guide_id=str(guide_id)):
            guide = await self.get_guide(guide_id)
            ensure_can_modify(actor, guide.user_id, "guide", guide_id)

            updates = {
                key: value
                for key, value in {
                    "title": title,
                    "description": description,
                    "map_image_url": map_image_url,
                }.items()
                if value is not None
            }
            updated = Guide.model_validate(
                {
                    **guide.model_dump(),
                    **updates,
                    "version": guide.version + 1,
                    "updated_at": datetime.now(),
                }
            )
            return await self.guide_repository.save(updated)

    async def add_marker(
        self,
        actor: Actor,
        guide_id: GuideId,
        title: str,
        position_x: int,
        position_y: int,
        achievement_id: Optional[AchievementId] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        quick_tip: Optional[str] = None,
    ) -> MapMarker:
        """Place a marker on a guide's map.

        Raises:
            NotFoundError: If the guide does not exist
            NotAuthorizedError: If the actor does not own the guide
        """
        with logfire.span("guide_service.add_marker", guide_id=str(guide_id)):
            guide = await self.get_guide(guide_id)
            ensure_can_modify(actor, guide.user_id, "guide", guide_id)

            marker = MapMarker(
                id=MapMarkerId(uuid4()),
                guide_id=guide_id,
                achievement_id=achievement_id,
                title=title,
                description=description,
                image_url=image_url,
                quick_tip=quick_tip,
                position_x=position_x,
                position_y=position_y,
                created_at=datetime.now(),
            )
            return await self.map_marker_repository.save(marker)

    async def delete_marker(self, actor: Actor, marker_id: MapMarkerId) -> None:
        """Remove a marker; ownership is checked through its guide.

        Raises:
            NotFoundError: If the marker does not exist
            NotAuthorizedError: If the actor does not own the guide
        """
        with logfire.span("guide_service.delete_marker", marker_id=str(marker_id)):
            marker = await self.map_marker_repository.find_by_id(marker_id)
            if not marker:
                raise NotFoundError("Marker", str(marker_id))
            guide = await self.get_guide(marker.guide_id)
            ensure_can_modify(actor, guide.user_id, "marker", marker_id)
            await self.map_marker_repository.delete(marker_id)
