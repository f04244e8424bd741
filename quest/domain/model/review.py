"""Review entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import GameId, ReviewId, UserId


class Review(DomainModel):
    """Review of a game by a user.

    Business rules:
    - One review per (user, game)
    - Ratings feed the game's average_rating/total_ratings/total_reviews
    - upvotes/downvotes are stored columns and are not derived from votes
    """

    id: ReviewId
    user_id: UserId
    game_id: GameId
    rating: int = Field(ge=1, le=10)
    title: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(min_length=1)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
