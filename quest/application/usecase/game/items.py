"""Response items shared by game use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import Game, Platform, Tag
from quest.domain.value import TagCategory


class GameItem(BaseModel):
    """Game with its denormalized aggregates."""

    id: str
    title: str
    description: str | None
    cover_image_url: str | None
    release_date: datetime | None
    developer: str | None
    publisher: str | None
    average_rating: int
    total_ratings: int
    total_reviews: int
    total_achievements: int
    created_at: datetime

    @classmethod
    def from_game(cls, game: Game) -> "GameItem":
        return cls(
            id=str(game.id),
            title=game.title,
            description=game.description,
            cover_image_url=game.cover_image_url,
            release_date=game.release_date,
            developer=game.developer,
            publisher=game.publisher,
            average_rating=game.average_rating,
            total_ratings=game.total_ratings,
            total_reviews=game.total_reviews,
            total_achievements=game.total_achievements,
            created_at=game.created_at,
        )


class PlatformItem(BaseModel):
    """Platform item."""

    id: str
    name: str
    icon: str | None

    @classmethod
    def from_platform(cls, platform: Platform) -> "PlatformItem":
        return cls(id=str(platform.id), name=platform.name.root, icon=platform.icon)


class TagItem(BaseModel):
    """Tag item."""

    id: str
    name: str
    category: TagCategory

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(id=str(tag.id), name=tag.name.root, category=tag.category)
