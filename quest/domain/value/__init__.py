"""Domain value objects for GameQuest."""

from quest.domain.value.identifiers import (
    AchievementId,
    AchievementImageId,
    ActivityId,
    CommentId,
    DifficultyVoteId,
    FollowerId,
    GameId,
    GuideId,
    LibraryEntryId,
    MapMarkerId,
    PlatformId,
    ReviewId,
    TagId,
    UserAchievementId,
    UserId,
    VoteId,
)
from quest.domain.value.types import (
    ActivityType,
    Actor,
    CommentableType,
    LibraryStatus,
    TagCategory,
    TagName,
    UserRole,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "GameId",
    "PlatformId",
    "TagId",
    "LibraryEntryId",
    "ReviewId",
    "AchievementId",
    "UserAchievementId",
    "AchievementImageId",
    "DifficultyVoteId",
    "GuideId",
    "MapMarkerId",
    "CommentId",
    "VoteId",
    "FollowerId",
    "ActivityId",
    # Types
    "Actor",
    "ActivityType",
    "CommentableType",
    "LibraryStatus",
    "TagCategory",
    "TagName",
    "UserRole",
    "VotableType",
    "VoteType",
]
