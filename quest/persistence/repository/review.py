"""PostgreSQL implementation of Review repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, select

from quest.domain.model import Review
from quest.domain.repository import ReviewRepository
from quest.domain.value import GameId, ReviewId, UserId
from quest.persistence.mappers import model_to_dict, row_to_review
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import reviews_table


class PostgresReviewRepository(PostgresRepository, ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        stmt = select(reviews_table).where(reviews_table.c.id == review_id)
        return await self._fetch_one(stmt, row_to_review)

    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Review]:
        stmt = select(reviews_table).where(
            and_(
                reviews_table.c.user_id == user_id,
                reviews_table.c.game_id == game_id,
            )
        )
        return await self._fetch_one(stmt, row_to_review)

    async def find_by_game(
        self, game_id: GameId, limit: int = 20, offset: int = 0
    ) -> list[Review]:
        stmt = (
            select(reviews_table)
            .where(reviews_table.c.game_id == game_id)
            .order_by(reviews_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt, row_to_review)

    async def rating_summary(self, game_id: GameId) -> tuple[int, int]:
        stmt = select(
            func.count(reviews_table.c.id),
            func.coalesce(func.sum(reviews_table.c.rating), 0),
        ).where(reviews_table.c.game_id == game_id)
        result = await self._execute(stmt)
        count, total = result.one()
        return int(count), int(total)

    async def save(self, review: Review) -> Review:
        """Save a review (create or update)."""
        existing = await self.find_by_id(review.id)

        review_dict = model_to_dict(review)

        if existing:
            stmt = (
                reviews_table.update()
                .where(reviews_table.c.id == review.id)
                .values(**review_dict)
            )
        else:
            stmt = reviews_table.insert().values(**review_dict)

        await self._write(stmt)
        return review

    async def delete(self, review_id: ReviewId) -> None:
        stmt = delete(reviews_table).where(reviews_table.c.id == review_id)
        await self._write(stmt)
