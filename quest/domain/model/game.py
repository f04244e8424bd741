"""Game aggregate root and its catalogue entities.

A game carries denormalized aggregates that are kept in sync with the
fact rows that reference it:
- average_rating / total_ratings / total_reviews from its reviews
- total_achievements from its achievements
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import GameId, PlatformId, TagCategory, TagId, TagName


class Game(DomainModel):
    """Game aggregate root."""

    id: GameId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    release_date: Optional[datetime] = None
    developer: Optional[str] = Field(default=None, max_length=255)
    publisher: Optional[str] = Field(default=None, max_length=255)
    average_rating: int = Field(default=0, ge=0)
    total_ratings: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0)
    total_achievements: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Platform(DomainModel):
    """Gaming platform (e.g. 'PC', 'Nintendo Switch')."""

    id: PlatformId
    name: TagName
    icon: Optional[str] = Field(default=None, max_length=50)


class Tag(DomainModel):
    """Game tag, grouped by category."""

    id: TagId
    name: TagName
    category: TagCategory = TagCategory.GENRE
