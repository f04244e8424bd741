"""In-memory repository implementations for testing."""

from .achievement import (
    InMemoryAchievementImageRepository,
    InMemoryAchievementRepository,
    InMemoryDifficultyVoteRepository,
    InMemoryUserAchievementRepository,
)
from .activity import InMemoryActivityRepository
from .base import InMemoryRepository
from .comment import InMemoryCommentRepository
from .game import InMemoryGameRepository, InMemoryPlatformRepository, InMemoryTagRepository
from .guide import InMemoryGuideRepository, InMemoryMapMarkerRepository
from .library import InMemoryLibraryRepository
from .review import InMemoryReviewRepository
from .storage import InMemoryStorageClient
from .user import InMemoryFollowerRepository, InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAchievementImageRepository",
    "InMemoryAchievementRepository",
    "InMemoryActivityRepository",
    "InMemoryCommentRepository",
    "InMemoryDifficultyVoteRepository",
    "InMemoryFollowerRepository",
    "InMemoryGameRepository",
    "InMemoryGuideRepository",
    "InMemoryLibraryRepository",
    "InMemoryMapMarkerRepository",
    "InMemoryPlatformRepository",
    "InMemoryRepository",
    "InMemoryReviewRepository",
    "InMemoryStorageClient",
    "InMemoryTagRepository",
    "InMemoryUserAchievementRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
