"""PostgreSQL implementation of achievement repositories."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select

from quest.domain.model import (
    Achievement,
    AchievementImage,
    DifficultyVote,
    UserAchievement,
)
from quest.domain.repository import (
    AchievementImageRepository,
    AchievementRepository,
    DifficultyVoteRepository,
    UserAchievementRepository,
)
from quest.domain.value import AchievementId, GameId, UserId
from quest.persistence.mappers import (
    model_to_dict,
    row_to_achievement,
    row_to_achievement_image,
    row_to_difficulty_vote,
    row_to_user_achievement,
)
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import (
    achievement_images_table,
    achievements_table,
    difficulty_votes_table,
    user_achievements_table,
)


class PostgresAchievementRepository(PostgresRepository, AchievementRepository):
    """PostgreSQL implementation of AchievementRepository."""

    async def find_by_id(self, achievement_id: AchievementId) -> Optional[Achievement]:
        stmt = select(achievements_table).where(achievements_table.c.id == achievement_id)
        return await self._fetch_one(stmt, row_to_achievement)

    async def find_by_id_for_update(
        self, achievement_id: AchievementId
    ) -> Optional[Achievement]:
        stmt = (
            select(achievements_table)
            .where(achievements_table.c.id == achievement_id)
            .with_for_update()
        )
        return await self._fetch_one(stmt, row_to_achievement)

    async def find_by_ids(self, achievement_ids: list[AchievementId]) -> list[Achievement]:
        if not achievement_ids:
            return []
        stmt = select(achievements_table).where(
            achievements_table.c.id.in_(achievement_ids)
        )
        return await self._fetch_all(stmt, row_to_achievement)

    async def find_by_game(self, game_id: GameId) -> list[Achievement]:
        stmt = (
            select(achievements_table)
            .where(achievements_table.c.game_id == game_id)
            .order_by(achievements_table.c.points, achievements_table.c.title)
        )
        return await self._fetch_all(stmt, row_to_achievement)

    async def save(self, achievement: Achievement) -> Achievement:
        stmt = insert(achievements_table).values(**model_to_dict(achievement))
        await self._write(stmt)
        return achievement

    async def update_difficulty(
        self, achievement_id: AchievementId, difficulty_rating: int, total_votes: int
    ) -> None:
        stmt = (
            achievements_table.update()
            .where(achievements_table.c.id == achievement_id)
            .values(
                difficulty_rating=difficulty_rating,
                total_difficulty_votes=total_votes,
            )
        )
        await self._write(stmt)

    async def increment_unlocks(self, achievement_id: AchievementId) -> None:
        """Atomically increment total_unlocks by 1.

        Args:
            achievement_id: Achievement ID to update
        """
        stmt = (
            achievements_table.update()
            .where(achievements_table.c.id == achievement_id)
            .values(total_unlocks=achievements_table.c.total_unlocks + 1)
        )
        await self._write(stmt)


class PostgresUserAchievementRepository(PostgresRepository, UserAchievementRepository):
    """PostgreSQL implementation of UserAchievementRepository."""

    async def save(self, unlock: UserAchievement) -> UserAchievement:
        stmt = insert(user_achievements_table).values(**model_to_dict(unlock))
        await self._write(stmt)
        return unlock

    async def find_by_user(self, user_id: UserId) -> list[UserAchievement]:
        stmt = (
            select(user_achievements_table)
            .where(user_achievements_table.c.user_id == user_id)
            .order_by(user_achievements_table.c.unlocked_at.desc())
        )
        return await self._fetch_all(stmt, row_to_user_achievement)


class PostgresDifficultyVoteRepository(PostgresRepository, DifficultyVoteRepository):
    """PostgreSQL implementation of DifficultyVoteRepository."""

    async def save(self, vote: DifficultyVote) -> DifficultyVote:
        stmt = insert(difficulty_votes_table).values(**model_to_dict(vote))
        await self._write(stmt)
        return vote

    async def find_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> Optional[DifficultyVote]:
        stmt = select(difficulty_votes_table).where(
            and_(
                difficulty_votes_table.c.user_id == user_id,
                difficulty_votes_table.c.achievement_id == achievement_id,
            )
        )
        return await self._fetch_one(stmt, row_to_difficulty_vote)

    async def delete_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> bool:
        stmt = delete(difficulty_votes_table).where(
            and_(
                difficulty_votes_table.c.user_id == user_id,
                difficulty_votes_table.c.achievement_id == achievement_id,
            )
        )
        result = await self._write(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def summarize(self, achievement_id: AchievementId) -> tuple[int, int]:
        stmt = select(
            func.count(difficulty_votes_table.c.id),
            func.coalesce(func.sum(difficulty_votes_table.c.difficulty), 0),
        ).where(difficulty_votes_table.c.achievement_id == achievement_id)
        result = await self._execute(stmt)
        count, total = result.one()
        return int(count), int(total)


class PostgresAchievementImageRepository(PostgresRepository, AchievementImageRepository):
    """PostgreSQL implementation of AchievementImageRepository."""

    async def save(self, image: AchievementImage) -> AchievementImage:
        stmt = insert(achievement_images_table).values(**model_to_dict(image))
        await self._write(stmt)
        return image

    async def find_by_achievement(
        self, achievement_id: AchievementId
    ) -> list[AchievementImage]:
        stmt = (
            select(achievement_images_table)
            .where(achievement_images_table.c.achievement_id == achievement_id)
            .order_by(achievement_images_table.c.upvotes.desc())
        )
        return await self._fetch_all(stmt, row_to_achievement_image)
