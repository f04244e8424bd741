"""In-memory review repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quest.domain.model import Review
from quest.domain.repository import ReviewRepository
from quest.domain.value import GameId, ReviewId, UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryReviewRepository(InMemoryRepository, ReviewRepository):
    """In-memory implementation of ReviewRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._reviews: dict[ReviewId, Review] = {}

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        await self._ensure_available()
        return self._reviews.get(review_id)

    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Review]:
        await self._ensure_available()
        for review in self._reviews.values():
            if review.user_id == user_id and review.game_id == game_id:
                return review
        return None

    async def find_by_game(
        self, game_id: GameId, limit: int = 20, offset: int = 0
    ) -> list[Review]:
        await self._ensure_available()
        reviews = [r for r in self._reviews.values() if r.game_id == game_id]
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews[offset : offset + limit]

    async def rating_summary(self, game_id: GameId) -> tuple[int, int]:
        await self._ensure_available()
        ratings = [r.rating for r in self._reviews.values() if r.game_id == game_id]
        return len(ratings), sum(ratings)

    async def save(self, review: Review) -> Review:
        """Save a review.

        Raises:
            IntegrityError: If another review exists for the same (user, game)
        """
        await self._ensure_available()
        existing = await self.find_by_user_and_game(review.user_id, review.game_id)
        if existing and existing.id != review.id:
            raise IntegrityError("Duplicate review", None, Exception())
        self._reviews[review.id] = review
        return review

    async def delete(self, review_id: ReviewId) -> None:
        await self._ensure_available()
        self._reviews.pop(review_id, None)
