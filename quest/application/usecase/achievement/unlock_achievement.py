"""Unlock achievement use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quest.application.usecase.base import BaseUseCase
from quest.domain.service import AchievementService
from quest.domain.value import AchievementId, UserId


class UnlockAchievementRequest(BaseModel):
    """Unlock achievement request."""

    user_id: UUID  # From authenticated user
    achievement_id: UUID


class UnlockAchievementResponse(BaseModel):
    """Id of the unlock record."""

    id: str


class UnlockAchievementUseCase(BaseUseCase):
    """Use case for unlocking an achievement."""

    def __init__(self, achievement_service: AchievementService) -> None:
        """Initialize unlock achievement use case.

        Args:
            achievement_service: Achievement domain service
        """
        self.achievement_service = achievement_service

    async def execute(self, request: UnlockAchievementRequest) -> UnlockAchievementResponse:
        """Execute unlock flow.

        Args:
            request: Unlock request

        Returns:
            The unlock record id

        Raises:
            NotFoundError: If the achievement does not exist
            DuplicateUnlockError: If already unlocked
        """
        with logfire.span(
            "unlock_achievement.execute",
            user_id=str(request.user_id),
            achievement_id=str(request.achievement_id),
        ):
            unlock = await self.achievement_service.unlock(
                UserId(request.user_id), AchievementId(request.achievement_id)
            )
            return UnlockAchievementResponse(id=str(unlock.id))
