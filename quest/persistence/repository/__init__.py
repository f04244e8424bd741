"""PostgreSQL repository implementations."""

from quest.persistence.repository.achievement import (
    PostgresAchievementImageRepository,
    PostgresAchievementRepository,
    PostgresDifficultyVoteRepository,
    PostgresUserAchievementRepository,
)
from quest.persistence.repository.activity import PostgresActivityRepository
from quest.persistence.repository.comment import PostgresCommentRepository
from quest.persistence.repository.game import (
    PostgresGameRepository,
    PostgresPlatformRepository,
    PostgresTagRepository,
)
from quest.persistence.repository.guide import (
    PostgresGuideRepository,
    PostgresMapMarkerRepository,
)
from quest.persistence.repository.library import PostgresLibraryRepository
from quest.persistence.repository.review import PostgresReviewRepository
from quest.persistence.repository.user import (
    PostgresFollowerRepository,
    PostgresUserRepository,
)
from quest.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAchievementImageRepository",
    "PostgresAchievementRepository",
    "PostgresActivityRepository",
    "PostgresCommentRepository",
    "PostgresDifficultyVoteRepository",
    "PostgresFollowerRepository",
    "PostgresGameRepository",
    "PostgresGuideRepository",
    "PostgresLibraryRepository",
    "PostgresMapMarkerRepository",
    "PostgresPlatformRepository",
    "PostgresReviewRepository",
    "PostgresTagRepository",
    "PostgresUserAchievementRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
