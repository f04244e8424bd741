"""Strongly typed identifiers for GameQuest domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
GameId = NewType("GameId", UUID)
PlatformId = NewType("PlatformId", UUID)
TagId = NewType("TagId", UUID)
LibraryEntryId = NewType("LibraryEntryId", UUID)
ReviewId = NewType("ReviewId", UUID)
AchievementId = NewType("AchievementId", UUID)
UserAchievementId = NewType("UserAchievementId", UUID)
AchievementImageId = NewType("AchievementImageId", UUID)
DifficultyVoteId = NewType("DifficultyVoteId", UUID)
GuideId = NewType("GuideId", UUID)
MapMarkerId = NewType("MapMarkerId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
FollowerId = NewType("FollowerId", UUID)
ActivityId = NewType("ActivityId", UUID)
