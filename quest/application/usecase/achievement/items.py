"""Response items for achievement use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import Achievement, AchievementImage, UserAchievement


class AchievementItem(BaseModel):
    """Achievement with its aggregates."""

    id: str
    game_id: str
    title: str
    description: str | None
    icon_url: str | None
    points: int
    difficulty_rating: int
    total_difficulty_votes: int
    total_unlocks: int
    estimated_time: int | None
    is_missable: bool
    is_buggy: bool
    is_grindy: bool
    is_easy: bool
    text_guide: str | None

    @classmethod
    def from_achievement(cls, achievement: Achievement) -> "AchievementItem":
        return cls(
            id=str(achievement.id),
            game_id=str(achievement.game_id),
            title=achievement.title,
            description=achievement.description,
            icon_url=achievement.icon_url,
            points=achievement.points,
            difficulty_rating=achievement.difficulty_rating,
            total_difficulty_votes=achievement.total_difficulty_votes,
            total_unlocks=achievement.total_unlocks,
            estimated_time=achievement.estimated_time,
            is_missable=achievement.is_missable,
            is_buggy=achievement.is_buggy,
            is_grindy=achievement.is_grindy,
            is_easy=achievement.is_easy,
            text_guide=achievement.text_guide,
        )


class AchievementImageItem(BaseModel):
    """Achievement image item."""

    id: str
    user_id: str
    image_url: str
    caption: str | None
    upvotes: int
    created_at: datetime

    @classmethod
    def from_image(cls, image: AchievementImage) -> "AchievementImageItem":
        return cls(
            id=str(image.id),
            user_id=str(image.user_id),
            image_url=image.image_url,
            caption=image.caption,
            upvotes=image.upvotes,
            created_at=image.created_at,
        )


class UnlockItem(BaseModel):
    """Unlock record item."""

    id: str
    achievement_id: str
    unlocked_at: datetime

    @classmethod
    def from_unlock(cls, unlock: UserAchievement) -> "UnlockItem":
        return cls(
            id=str(unlock.id),
            achievement_id=str(unlock.achievement_id),
            unlocked_at=unlock.unlocked_at,
        )
