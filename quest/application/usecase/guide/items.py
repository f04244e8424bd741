"""Response items for guide use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import Guide, MapMarker


class GuideItem(BaseModel):
    """Guide item."""

    id: str
    game_id: str
    user_id: str
    title: str
    description: str | None
    map_image_url: str | None
    version: int
    upvotes: int
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_guide(cls, guide: Guide) -> "GuideItem":
        return cls(
            id=str(guide.id),
            game_id=str(guide.game_id),
            user_id=str(guide.user_id),
            title=guide.title,
            description=guide.description,
            map_image_url=guide.map_image_url,
            version=guide.version,
            upvotes=guide.upvotes,
            views=guide.views,
            created_at=guide.created_at,
            updated_at=guide.updated_at,
        )


class MapMarkerItem(BaseModel):
    """Map marker item."""

    id: str
    guide_id: str
    achievement_id: str | None
    title: str
    description: str | None
    image_url: str | None
    quick_tip: str | None
    position_x: int
    position_y: int

    @classmethod
    def from_marker(cls, marker: MapMarker) -> "MapMarkerItem":
        return cls(
            id=str(marker.id),
            guide_id=str(marker.guide_id),
            achievement_id=str(marker.achievement_id) if marker.achievement_id else None,
            title=marker.title,
            description=marker.description,
            image_url=marker.image_url,
            quick_tip=marker.quick_tip,
            position_x=marker.position_x,
            position_y=marker.position_y,
        )
