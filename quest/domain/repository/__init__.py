"""Repository interfaces for GameQuest domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quest.domain.repository.achievement import (
    AchievementImageRepository,
    AchievementRepository,
    DifficultyVoteRepository,
    UserAchievementRepository,
)
from quest.domain.repository.activity import ActivityRepository
from quest.domain.repository.comment import CommentRepository
from quest.domain.repository.game import GameRepository, PlatformRepository, TagRepository
from quest.domain.repository.guide import GuideRepository, MapMarkerRepository
from quest.domain.repository.library import LibraryRepository
from quest.domain.repository.review import ReviewRepository
from quest.domain.repository.user import FollowerRepository, UserRepository
from quest.domain.repository.vote import VoteRepository

__all__ = [
    "AchievementImageRepository",
    "AchievementRepository",
    "ActivityRepository",
    "CommentRepository",
    "DifficultyVoteRepository",
    "FollowerRepository",
    "GameRepository",
    "GuideRepository",
    "LibraryRepository",
    "MapMarkerRepository",
    "PlatformRepository",
    "ReviewRepository",
    "TagRepository",
    "UserAchievementRepository",
    "UserRepository",
    "VoteRepository",
]
