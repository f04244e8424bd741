"""Achievement use cases."""

from .add_image import (
    AddAchievementImageRequest,
    AddAchievementImageResponse,
    AddAchievementImageUseCase,
)
from .create_achievement import (
    CreateAchievementRequest,
    CreateAchievementResponse,
    CreateAchievementUseCase,
)
from .get_achievement import (
    GetAchievementRequest,
    GetAchievementResponse,
    GetAchievementUseCase,
)
from .items import AchievementImageItem, AchievementItem, UnlockItem
from .list_achievements import (
    ListGameAchievementsRequest,
    ListGameAchievementsResponse,
    ListGameAchievementsUseCase,
    ListUnlockedRequest,
    ListUnlockedResponse,
    ListUnlockedUseCase,
)
from .unlock_achievement import (
    UnlockAchievementRequest,
    UnlockAchievementResponse,
    UnlockAchievementUseCase,
)
from .vote_difficulty import (
    RemoveDifficultyVoteRequest,
    RemoveDifficultyVoteResponse,
    RemoveDifficultyVoteUseCase,
    VoteDifficultyRequest,
    VoteDifficultyResponse,
    VoteDifficultyUseCase,
)

__all__ = [
    "AchievementImageItem",
    "AchievementItem",
    "AddAchievementImageRequest",
    "AddAchievementImageResponse",
    "AddAchievementImageUseCase",
    "CreateAchievementRequest",
    "CreateAchievementResponse",
    "CreateAchievementUseCase",
    "GetAchievementRequest",
    "GetAchievementResponse",
    "GetAchievementUseCase",
    "ListGameAchievementsRequest",
    "ListGameAchievementsResponse",
    "ListGameAchievementsUseCase",
    "ListUnlockedRequest",
    "ListUnlockedResponse",
    "ListUnlockedUseCase",
    "RemoveDifficultyVoteRequest",
    "RemoveDifficultyVoteResponse",
    "RemoveDifficultyVoteUseCase",
    "UnlockAchievementRequest",
    "UnlockAchievementResponse",
    "UnlockAchievementUseCase",
    "UnlockItem",
    "VoteDifficultyRequest",
    "VoteDifficultyResponse",
    "VoteDifficultyUseCase",
]
