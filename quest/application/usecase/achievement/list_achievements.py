"""List achievements and unlocks use cases."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.achievement.items import AchievementItem, UnlockItem
from quest.application.usecase.base import degrade_to_empty
from quest.domain.service import AchievementService
from quest.domain.value import GameId, UserId


class ListGameAchievementsRequest(BaseModel):
    """List game achievements request."""

    game_id: UUID


class ListGameAchievementsResponse(BaseModel):
    """Achievements ordered by points."""

    achievements: list[AchievementItem]


class ListUnlockedRequest(BaseModel):
    """List unlocked achievements request."""

    user_id: UUID
    game_id: UUID | None = None


class ListUnlockedResponse(BaseModel):
    """Unlocks, newest first."""

    unlocks: list[UnlockItem]


class ListGameAchievementsUseCase:
    """Use case for listing a game's achievements."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(
        self, request: ListGameAchievementsRequest
    ) -> ListGameAchievementsResponse:
        achievements = await degrade_to_empty(
            "list_game_achievements",
            self.achievement_service.get_game_achievements(GameId(request.game_id)),
        )
        return ListGameAchievementsResponse(
            achievements=[AchievementItem.from_achievement(a) for a in achievements]
        )


class ListUnlockedUseCase:
    """Use case for listing a user's unlocked achievements."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(self, request: ListUnlockedRequest) -> ListUnlockedResponse:
        game_id = GameId(request.game_id) if request.game_id else None
        unlocks = await degrade_to_empty(
            "list_unlocked",
            self.achievement_service.get_unlocked(UserId(request.user_id), game_id),
        )
        return ListUnlockedResponse(unlocks=[UnlockItem.from_unlock(u) for u in unlocks])
