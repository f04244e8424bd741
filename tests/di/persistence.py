"""Mock persistence provider for testing."""

from dishka import Scope, provide

from quest.domain.repository import (
    AchievementImageRepository,
    AchievementRepository,
    ActivityRepository,
    CommentRepository,
    DifficultyVoteRepository,
    FollowerRepository,
    GameRepository,
    GuideRepository,
    LibraryRepository,
    MapMarkerRepository,
    PlatformRepository,
    ReviewRepository,
    TagRepository,
    UserAchievementRepository,
    UserRepository,
    VoteRepository,
)
from quest.persistence.database import StorageClient
from quest.persistence.repository.inmemory import (
    InMemoryAchievementImageRepository,
    InMemoryAchievementRepository,
    InMemoryActivityRepository,
    InMemoryCommentRepository,
    InMemoryDifficultyVoteRepository,
    InMemoryFollowerRepository,
    InMemoryGameRepository,
    InMemoryGuideRepository,
    InMemoryLibraryRepository,
    InMemoryMapMarkerRepository,
    InMemoryPlatformRepository,
    InMemoryReviewRepository,
    InMemoryStorageClient,
    InMemoryTagRepository,
    InMemoryUserAchievementRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from quest.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container;
    each test builds its own container for isolation.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_storage_client(self) -> StorageClient:
        return InMemoryStorageClient()

    @provide
    def get_user_repository(self, storage: StorageClient) -> UserRepository:
        return InMemoryUserRepository(storage)

    @provide
    def get_follower_repository(self, storage: StorageClient) -> FollowerRepository:
        return InMemoryFollowerRepository(storage)

    @provide
    def get_in_memory_platforms(
        self, storage: StorageClient
    ) -> InMemoryPlatformRepository:
        return InMemoryPlatformRepository(storage)

    @provide
    def get_in_memory_tags(self, storage: StorageClient) -> InMemoryTagRepository:
        return InMemoryTagRepository(storage)

    @provide
    def get_platform_repository(
        self, platforms: InMemoryPlatformRepository
    ) -> PlatformRepository:
        return platforms

    @provide
    def get_tag_repository(self, tags: InMemoryTagRepository) -> TagRepository:
        return tags

    @provide
    def get_game_repository(
        self,
        platforms: InMemoryPlatformRepository,
        tags: InMemoryTagRepository,
        storage: StorageClient,
    ) -> GameRepository:
        """Games resolve platform and tag names through the shared catalogue."""
        return InMemoryGameRepository(platforms=platforms, tags=tags, storage=storage)

    @provide
    def get_library_repository(self, storage: StorageClient) -> LibraryRepository:
        return InMemoryLibraryRepository(storage)

    @provide
    def get_review_repository(self, storage: StorageClient) -> ReviewRepository:
        return InMemoryReviewRepository(storage)

    @provide
    def get_achievement_repository(
        self, storage: StorageClient
    ) -> AchievementRepository:
        return InMemoryAchievementRepository(storage)

    @provide
    def get_user_achievement_repository(
        self, storage: StorageClient
    ) -> UserAchievementRepository:
        return InMemoryUserAchievementRepository(storage)

    @provide
    def get_difficulty_vote_repository(
        self, storage: StorageClient
    ) -> DifficultyVoteRepository:
        return InMemoryDifficultyVoteRepository(storage)

    @provide
    def get_achievement_image_repository(
        self, storage: StorageClient
    ) -> AchievementImageRepository:
        return InMemoryAchievementImageRepository(storage)

    @provide
    def get_guide_repository(self, storage: StorageClient) -> GuideRepository:
        return InMemoryGuideRepository(storage)

    @provide
    def get_map_marker_repository(self, storage: StorageClient) -> MapMarkerRepository:
        return InMemoryMapMarkerRepository(storage)

    @provide
    def get_comment_repository(self, storage: StorageClient) -> CommentRepository:
        return InMemoryCommentRepository(storage)

    @provide
    def get_vote_repository(self, storage: StorageClient) -> VoteRepository:
        return InMemoryVoteRepository(storage)

    @provide
    def get_activity_repository(self, storage: StorageClient) -> ActivityRepository:
        return InMemoryActivityRepository(storage)
