"""Recomputation of denormalized aggregates.

Game and Achievement rows carry summary columns derived from the fact rows
beneath them. This service rebuilds those columns from a fresh aggregate
query. Callers hold the parent row lock (``find_by_id_for_update``) and
have already written the fact row in the same transaction, so every
recomputation sees all committed facts and concurrent writers cannot drop
each other's contribution.
"""

from decimal import ROUND_HALF_UP, Decimal

import logfire

from quest.domain.repository import (
    AchievementRepository,
    DifficultyVoteRepository,
    GameRepository,
    ReviewRepository,
)
from quest.domain.value import AchievementId, GameId

from .base import Service


def round_half_up(total: int, count: int) -> int:
    """Mean of ``count`` values summing to ``total``, rounded half up.

    Returns 0 when there are no values.

    >>> round_half_up(13, 2)
    7
    """
    if count == 0:
        return 0
    mean = Decimal(total) / Decimal(count)
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class AggregateService(Service):
    """Writes summary columns from fact-table aggregates."""

    def __init__(
        self,
        achievement_repository: AchievementRepository,
        difficulty_vote_repository: DifficultyVoteRepository,
        game_repository: GameRepository,
        review_repository: ReviewRepository,
    ) -> None:
        self.achievement_repository = achievement_repository
        self.difficulty_vote_repository = difficulty_vote_repository
        self.game_repository = game_repository
        self.review_repository = review_repository

    async def recompute_difficulty(self, achievement_id: AchievementId) -> tuple[int, int]:
        """Rebuild difficulty_rating and total_difficulty_votes.

        Args:
            achievement_id: Achievement whose votes changed

        Returns:
            (difficulty_rating, total_difficulty_votes) as written
        """
        with logfire.span(
            "aggregate_service.recompute_difficulty", achievement_id=str(achievement_id)
        ):
            count, total = await self.difficulty_vote_repository.summarize(achievement_id)
            rating = round_half_up(total, count)
            await self.achievement_repository.update_difficulty(
                achievement_id, rating, count
            )
            logfire.info(
                "Difficulty recomputed",
                achievement_id=str(achievement_id),
                difficulty_rating=rating,
                total_votes=count,
            )
            return rating, count

    async def recompute_game_rating(self, game_id: GameId) -> tuple[int, int]:
        """Rebuild average_rating, total_ratings and total_reviews.

        Returns:
            (average_rating, review count) as written
        """
        with logfire.span("aggregate_service.recompute_game_rating", game_id=str(game_id)):
            count, total = await self.review_repository.rating_summary(game_id)
            average = round_half_up(total, count)
            await self.game_repository.update_rating_stats(
                game_id,
                average_rating=average,
                total_ratings=count,
                total_reviews=count,
            )
            logfire.info(
                "Game rating recomputed",
                game_id=str(game_id),
                average_rating=average,
                total_reviews=count,
            )
            return average, count
