"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quest.config import Settings
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
from quest.persistence.database import (
    StorageClient,
    create_engine,
    create_session_factory,
)
from quest.persistence.repository import (
    PostgresAchievementImageRepository,
    PostgresAchievementRepository,
    PostgresActivityRepository,
    PostgresCommentRepository,
    PostgresDifficultyVoteRepository,
    PostgresFollowerRepository,
    PostgresGameRepository,
    PostgresGuideRepository,
    PostgresLibraryRepository,
    PostgresMapMarkerRepository,
    PostgresPlatformRepository,
    PostgresReviewRepository,
    PostgresTagRepository,
    PostgresUserAchievementRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from quest.util.di.base import ProviderBase
from quest.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    async def get_storage_client(
        self, engine: AsyncEngine, settings: Settings
    ) -> StorageClient:
        """Provide the storage client, probing the database once.

        The application starts even if the first ping fails; the client then
        reports unavailable until a later reconnect succeeds.
        """
        storage = StorageClient(engine, settings)
        await storage.connect()
        return storage

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Row locks taken by the
        aggregate updates are held until then.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide
    def get_user_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> UserRepository:
        return PostgresUserRepository(session, storage)

    @provide
    def get_follower_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> FollowerRepository:
        return PostgresFollowerRepository(session, storage)

    @provide
    def get_game_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> GameRepository:
        return PostgresGameRepository(session, storage)

    @provide
    def get_platform_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> PlatformRepository:
        return PostgresPlatformRepository(session, storage)

    @provide
    def get_tag_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> TagRepository:
        return PostgresTagRepository(session, storage)

    @provide
    def get_library_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> LibraryRepository:
        return PostgresLibraryRepository(session, storage)

    @provide
    def get_review_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> ReviewRepository:
        return PostgresReviewRepository(session, storage)

    @provide
    def get_achievement_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> AchievementRepository:
        return PostgresAchievementRepository(session, storage)

    @provide
    def get_user_achievement_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> UserAchievementRepository:
        return PostgresUserAchievementRepository(session, storage)

    @provide
    def get_difficulty_vote_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> DifficultyVoteRepository:
        return PostgresDifficultyVoteRepository(session, storage)

    @provide
    def get_achievement_image_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> AchievementImageRepository:
        return PostgresAchievementImageRepository(session, storage)

    @provide
    def get_guide_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> GuideRepository:
        return PostgresGuideRepository(session, storage)

    @provide
    def get_map_marker_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> MapMarkerRepository:
        return PostgresMapMarkerRepository(session, storage)

    @provide
    def get_comment_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> CommentRepository:
        return PostgresCommentRepository(session, storage)

    @provide
    def get_vote_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> VoteRepository:
        return PostgresVoteRepository(session, storage)

    @provide
    def get_activity_repository(
        self, session: AsyncSession, storage: StorageClient
    ) -> ActivityRepository:
        return PostgresActivityRepository(session, storage)
