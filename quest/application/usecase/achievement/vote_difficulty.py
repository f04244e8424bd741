"""Difficulty vote use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.base import BaseUseCase
from quest.domain.service import AchievementService
from quest.domain.value import AchievementId, UserId


class VoteDifficultyRequest(BaseModel):
    """Vote difficulty request."""

    user_id: UUID  # From authenticated user
    achievement_id: UUID
    difficulty: int = Field(ge=1, le=10)


class VoteDifficultyResponse(BaseModel):
    """Id of the stored vote."""

    id: str


class RemoveDifficultyVoteRequest(BaseModel):
    """Remove difficulty vote request."""

    user_id: UUID  # From authenticated user
    achievement_id: UUID


class RemoveDifficultyVoteResponse(BaseModel):
    """Whether a vote was removed."""

    success: bool
    removed: bool


class VoteDifficultyUseCase(BaseUseCase):
    """Use case for rating an achievement's difficulty."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(self, request: VoteDifficultyRequest) -> VoteDifficultyResponse:
        """Raises NotFoundError or DuplicateVoteError."""
        with logfire.span(
            "vote_difficulty.execute",
            achievement_id=str(request.achievement_id),
            difficulty=request.difficulty,
        ):
            vote = await self.achievement_service.record_difficulty_vote(
                UserId(request.user_id),
                AchievementId(request.achievement_id),
                request.difficulty,
            )
            return VoteDifficultyResponse(id=str(vote.id))


class RemoveDifficultyVoteUseCase:
    """Use case for withdrawing a difficulty vote."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(
        self, request: RemoveDifficultyVoteRequest
    ) -> RemoveDifficultyVoteResponse:
        removed = await self.achievement_service.remove_difficulty_vote(
            UserId(request.user_id), AchievementId(request.achievement_id)
        )
        return RemoveDifficultyVoteResponse(success=True, removed=removed)
