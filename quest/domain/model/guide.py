"""Guide entity and its map markers."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import AchievementId, GameId, GuideId, MapMarkerId, UserId


class Guide(DomainModel):
    """User-authored guide for a game, optionally with an annotated map.

    Only the latest version of a guide is listed for a game.
    """

    id: GuideId
    game_id: GameId
    user_id: UserId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    map_image_url: Optional[str] = None
    version: int = Field(default=1, ge=1)
    is_latest: bool = True
    upvotes: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class MapMarker(DomainModel):
    """Point of interest on a guide's map, optionally tied to an achievement."""

    id: MapMarkerId
    guide_id: GuideId
    achievement_id: Optional[AchievementId] = None
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None
    quick_tip: Optional[str] = None
    position_x: int
    position_y: int
    created_at: datetime = Field(default_factory=datetime.now)
