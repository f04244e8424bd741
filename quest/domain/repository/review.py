"""Review repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import Review
from quest.domain.value import GameId, ReviewId, UserId


class ReviewRepository(ABC):
    """Repository for Review entity."""

    @abstractmethod
    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        pass

    @abstractmethod
    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Review]:
        pass

    @abstractmethod
    async def find_by_game(
        self, game_id: GameId, limit: int = 20, offset: int = 0
    ) -> list[Review]:
        """List a game's reviews, newest first."""
        pass

    @abstractmethod
    async def rating_summary(self, game_id: GameId) -> tuple[int, int]:
        """Aggregate the ratings of a game's reviews.

        Args:
            game_id: The game's ID

        Returns:
            (count, sum of ratings); (0, 0) when there are no reviews
        """
        pass

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Save a review (create or update).

        Raises:
            IntegrityError: If creating a second review for the same (user, game)
        """
        pass

    @abstractmethod
    async def delete(self, review_id: ReviewId) -> None:
        pass
