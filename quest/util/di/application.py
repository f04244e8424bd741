"""Application layer DI providers."""

from dishka import Scope, provide

from quest.application.usecase.achievement import (
    AddAchievementImageUseCase,
    CreateAchievementUseCase,
    GetAchievementUseCase,
    ListGameAchievementsUseCase,
    ListUnlockedUseCase,
    RemoveDifficultyVoteUseCase,
    UnlockAchievementUseCase,
    VoteDifficultyUseCase,
)
from quest.application.usecase.activity import GetFeedUseCase, GetUserActivityUseCase
from quest.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from quest.application.usecase.catalog import (
    CreatePlatformUseCase,
    CreateTagUseCase,
    ListPlatformsUseCase,
    ListTagsUseCase,
)
from quest.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from quest.application.usecase.game import (
    CreateGameUseCase,
    GetGameUseCase,
    ListGamesUseCase,
    SearchGamesUseCase,
)
from quest.application.usecase.guide import (
    AddMapMarkerUseCase,
    CreateGuideUseCase,
    DeleteMapMarkerUseCase,
    GetGuideUseCase,
    ListGuidesUseCase,
    UpdateGuideUseCase,
)
from quest.application.usecase.library import (
    AddToLibraryUseCase,
    ListLibraryUseCase,
    RemoveLibraryEntryUseCase,
    UpdateLibraryEntryUseCase,
)
from quest.application.usecase.review import (
    CreateReviewUseCase,
    DeleteReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
)
from quest.application.usecase.user import (
    FollowUserUseCase,
    GetUserProfileUseCase,
    IsFollowingUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    UnfollowUserUseCase,
    UpdateUserProfileUseCase,
)
from quest.application.usecase.vote import (
    CastVoteUseCase,
    GetMyVoteUseCase,
    RemoveVoteUseCase,
)
from quest.config import FeedSettings
from quest.domain.service import ActivityService, JWTService, UserService
from quest.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Most use cases take a single domain service and are wired from their
    constructor signatures.
    """

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    get_current_user = provide(GetCurrentUserUseCase)

    # User use cases
    get_user_profile = provide(GetUserProfileUseCase)
    update_user_profile = provide(UpdateUserProfileUseCase)
    follow_user = provide(FollowUserUseCase)
    unfollow_user = provide(UnfollowUserUseCase)
    is_following = provide(IsFollowingUseCase)
    list_followers = provide(ListFollowersUseCase)
    list_following = provide(ListFollowingUseCase)

    # Catalogue use cases
    create_game = provide(CreateGameUseCase)
    get_game = provide(GetGameUseCase)
    list_games = provide(ListGamesUseCase)
    search_games = provide(SearchGamesUseCase)
    list_platforms = provide(ListPlatformsUseCase)
    create_platform = provide(CreatePlatformUseCase)
    list_tags = provide(ListTagsUseCase)
    create_tag = provide(CreateTagUseCase)

    # Library use cases
    add_to_library = provide(AddToLibraryUseCase)
    update_library_entry = provide(UpdateLibraryEntryUseCase)
    remove_library_entry = provide(RemoveLibraryEntryUseCase)
    list_library = provide(ListLibraryUseCase)

    # Review use cases
    create_review = provide(CreateReviewUseCase)
    update_review = provide(UpdateReviewUseCase)
    delete_review = provide(DeleteReviewUseCase)
    list_reviews = provide(ListReviewsUseCase)

    # Achievement use cases
    create_achievement = provide(CreateAchievementUseCase)
    get_achievement = provide(GetAchievementUseCase)
    list_game_achievements = provide(ListGameAchievementsUseCase)
    list_unlocked = provide(ListUnlockedUseCase)
    unlock_achievement = provide(UnlockAchievementUseCase)
    vote_difficulty = provide(VoteDifficultyUseCase)
    remove_difficulty_vote = provide(RemoveDifficultyVoteUseCase)
    add_achievement_image = provide(AddAchievementImageUseCase)

    # Guide use cases
    create_guide = provide(CreateGuideUseCase)
    get_guide = provide(GetGuideUseCase)
    list_guides = provide(ListGuidesUseCase)
    update_guide = provide(UpdateGuideUseCase)
    add_map_marker = provide(AddMapMarkerUseCase)
    delete_map_marker = provide(DeleteMapMarkerUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    list_comments = provide(ListCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Vote use cases
    cast_vote = provide(CastVoteUseCase)
    remove_vote = provide(RemoveVoteUseCase)
    get_my_vote = provide(GetMyVoteUseCase)

    # Activity use cases
    @provide
    def get_feed_use_case(
        self, activity_service: ActivityService, feed_settings: FeedSettings
    ) -> GetFeedUseCase:
        """Provide home feed use case."""
        return GetFeedUseCase(activity_service=activity_service, feed_settings=feed_settings)

    @provide
    def get_user_activity_use_case(
        self, activity_service: ActivityService, feed_settings: FeedSettings
    ) -> GetUserActivityUseCase:
        """Provide user activity timeline use case."""
        return GetUserActivityUseCase(
            activity_service=activity_service, feed_settings=feed_settings
        )
