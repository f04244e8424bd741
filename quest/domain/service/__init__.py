"""Domain services."""

from .achievement_service import AchievementService
from .activity_service import ActivityService
from .aggregate_service import AggregateService, round_half_up
from .base import Service, ensure_can_modify
from .comment_service import CommentService
from .game_service import GameService
from .guide_service import GuideService
from .jwt_service import JWTService
from .library_service import LibraryService
from .review_service import ReviewService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AchievementService",
    "ActivityService",
    "AggregateService",
    "CommentService",
    "GameService",
    "GuideService",
    "JWTService",
    "LibraryService",
    "ReviewService",
    "Service",
    "UserService",
    "VoteService",
    "ensure_can_modify",
    "round_half_up",
]
