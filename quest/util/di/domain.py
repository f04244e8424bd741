"""Domain layer DI providers."""

from dishka import Scope, provide

from quest.config import AuthSettings
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
from quest.domain.service import (
    AchievementService,
    ActivityService,
    AggregateService,
    CommentService,
    GameService,
    GuideService,
    JWTService,
    LibraryService,
    ReviewService,
    UserService,
    VoteService,
)
from quest.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped so they share the request's session
    and therefore its transaction and row locks.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        follower_repository: FollowerRepository,
        auth_settings: AuthSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            follower_repository=follower_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_activity_service(
        self,
        activity_repository: ActivityRepository,
        follower_repository: FollowerRepository,
    ) -> ActivityService:
        """Provide activity log domain service."""
        return ActivityService(
            activity_repository=activity_repository,
            follower_repository=follower_repository,
        )

    @provide
    def get_aggregate_service(
        self,
        achievement_repository: AchievementRepository,
        difficulty_vote_repository: DifficultyVoteRepository,
        game_repository: GameRepository,
        review_repository: ReviewRepository,
    ) -> AggregateService:
        """Provide aggregate recomputation service."""
        return AggregateService(
            achievement_repository=achievement_repository,
            difficulty_vote_repository=difficulty_vote_repository,
            game_repository=game_repository,
            review_repository=review_repository,
        )

    @provide
    def get_game_service(
        self,
        game_repository: GameRepository,
        platform_repository: PlatformRepository,
        tag_repository: TagRepository,
    ) -> GameService:
        """Provide game catalogue domain service."""
        return GameService(
            game_repository=game_repository,
            platform_repository=platform_repository,
            tag_repository=tag_repository,
        )

    @provide
    def get_library_service(
        self,
        library_repository: LibraryRepository,
        game_repository: GameRepository,
        activity_service: ActivityService,
    ) -> LibraryService:
        """Provide library domain service."""
        return LibraryService(
            library_repository=library_repository,
            game_repository=game_repository,
            activity_service=activity_service,
        )

    @provide
    def get_review_service(
        self,
        review_repository: ReviewRepository,
        game_repository: GameRepository,
        aggregate_service: AggregateService,
        activity_service: ActivityService,
    ) -> ReviewService:
        """Provide review domain service."""
        return ReviewService(
            review_repository=review_repository,
            game_repository=game_repository,
            aggregate_service=aggregate_service,
            activity_service=activity_service,
        )

    @provide
    def get_achievement_service(
        self,
        achievement_repository: AchievementRepository,
        user_achievement_repository: UserAchievementRepository,
        difficulty_vote_repository: DifficultyVoteRepository,
        achievement_image_repository: AchievementImageRepository,
        game_repository: GameRepository,
        aggregate_service: AggregateService,
        activity_service: ActivityService,
    ) -> AchievementService:
        """Provide achievement domain service."""
        return AchievementService(
            achievement_repository=achievement_repository,
            user_achievement_repository=user_achievement_repository,
            difficulty_vote_repository=difficulty_vote_repository,
            achievement_image_repository=achievement_image_repository,
            game_repository=game_repository,
            aggregate_service=aggregate_service,
            activity_service=activity_service,
        )

    @provide
    def get_guide_service(
        self,
        guide_repository: GuideRepository,
        map_marker_repository: MapMarkerRepository,
        game_repository: GameRepository,
        activity_service: ActivityService,
    ) -> GuideService:
        """Provide guide domain service."""
        return GuideService(
            guide_repository=guide_repository,
            map_marker_repository=map_marker_repository,
            game_repository=game_repository,
            activity_service=activity_service,
        )

    @provide
    def get_comment_service(self, comment_repository: CommentRepository) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)
