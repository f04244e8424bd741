"""Domain model entities for GameQuest."""

from quest.domain.model.achievement import (
    Achievement,
    AchievementImage,
    DifficultyVote,
    UserAchievement,
)
from quest.domain.model.activity import Activity
from quest.domain.model.comment import Comment
from quest.domain.model.game import Game, Platform, Tag
from quest.domain.model.guide import Guide, MapMarker
from quest.domain.model.library import LibraryEntry
from quest.domain.model.review import Review
from quest.domain.model.user import Follower, User
from quest.domain.model.vote import Vote

__all__ = [
    "User",
    "Follower",
    "Game",
    "Platform",
    "Tag",
    "LibraryEntry",
    "Review",
    "Achievement",
    "UserAchievement",
    "DifficultyVote",
    "AchievementImage",
    "Guide",
    "MapMarker",
    "Comment",
    "Vote",
    "Activity",
]
