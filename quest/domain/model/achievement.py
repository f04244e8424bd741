"""Achievement aggregate and the fact rows that feed it.

Denormalized aggregates on Achievement:
- difficulty_rating / total_difficulty_votes from DifficultyVote rows
- total_unlocks from UserAchievement rows
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import (
    AchievementId,
    AchievementImageId,
    DifficultyVoteId,
    GameId,
    UserAchievementId,
    UserId,
)


class Achievement(DomainModel):
    """Achievement belonging to one game."""

    id: AchievementId
    game_id: GameId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    icon_url: Optional[str] = None
    points: int = Field(default=0, ge=0)
    difficulty_rating: int = Field(default=0, ge=0, le=10)
    total_difficulty_votes: int = Field(default=0, ge=0)
    estimated_time: Optional[int] = Field(default=None, ge=0)  # minutes
    is_missable: bool = False
    is_buggy: bool = False
    is_grindy: bool = False
    is_easy: bool = False
    text_guide: Optional[str] = None
    total_unlocks: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class UserAchievement(DomainModel):
    """Unlock record. One per (user, achievement)."""

    id: UserAchievementId
    user_id: UserId
    achievement_id: AchievementId
    unlocked_at: datetime = Field(default_factory=datetime.now)


class DifficultyVote(DomainModel):
    """A user's difficulty estimate for an achievement. One per (user, achievement)."""

    id: DifficultyVoteId
    user_id: UserId
    achievement_id: AchievementId
    difficulty: int = Field(ge=1, le=10)
    created_at: datetime = Field(default_factory=datetime.now)


class AchievementImage(DomainModel):
    """Screenshot or visual hint attached to an achievement."""

    id: AchievementImageId
    achievement_id: AchievementId
    user_id: UserId
    image_url: str = Field(min_length=1)
    caption: Optional[str] = None
    upvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
