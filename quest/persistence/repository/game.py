"""PostgreSQL implementation of Game, Platform and Tag repositories."""

from typing import Optional

from sqlalchemy import insert, select

from quest.domain.model import Game, Platform, Tag
from quest.domain.repository import GameRepository, PlatformRepository, TagRepository
from quest.domain.value import GameId, PlatformId, TagId, TagName
from quest.persistence.mappers import (
    model_to_dict,
    row_to_game,
    row_to_platform,
    row_to_tag,
)
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import (
    game_platforms_table,
    game_tags_table,
    games_table,
    platforms_table,
    tags_table,
)


def like_pattern(query: str) -> str:
    """Substring pattern for ``ILIKE`` with ``\\``, ``%`` and ``_`` taken literally."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresGameRepository(PostgresRepository, GameRepository):
    """PostgreSQL implementation of GameRepository."""

    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        stmt = select(games_table).where(games_table.c.id == game_id)
        return await self._fetch_one(stmt, row_to_game)

    async def find_by_id_for_update(self, game_id: GameId) -> Optional[Game]:
        """Find a game and take a row lock (``SELECT ... FOR UPDATE``)."""
        stmt = select(games_table).where(games_table.c.id == game_id).with_for_update()
        return await self._fetch_one(stmt, row_to_game)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Game]:
        stmt = (
            select(games_table)
            .order_by(games_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt, row_to_game)

    async def search(self, query: str, limit: int = 20) -> list[Game]:
        stmt = (
            select(games_table)
            .where(games_table.c.title.ilike(like_pattern(query), escape="\\"))
            .order_by(games_table.c.title)
            .limit(limit)
        )
        return await self._fetch_all(stmt, row_to_game)

    async def save(self, game: Game) -> Game:
        stmt = insert(games_table).values(**model_to_dict(game))
        await self._write(stmt)
        return game

    async def update_rating_stats(
        self,
        game_id: GameId,
        average_rating: int,
        total_ratings: int,
        total_reviews: int,
    ) -> None:
        stmt = (
            games_table.update()
            .where(games_table.c.id == game_id)
            .values(
                average_rating=average_rating,
                total_ratings=total_ratings,
                total_reviews=total_reviews,
            )
        )
        await self._write(stmt)

    async def increment_achievements(self, game_id: GameId) -> None:
        """Atomically increment total_achievements by 1.

        Args:
            game_id: Game ID to update
        """
        stmt = (
            games_table.update()
            .where(games_table.c.id == game_id)
            .values(total_achievements=games_table.c.total_achievements + 1)
        )
        await self._write(stmt)

    async def add_platform(self, game_id: GameId, platform_id: PlatformId) -> None:
        stmt = insert(game_platforms_table).values(
            game_id=game_id, platform_id=platform_id
        )
        await self._write(stmt)

    async def add_tag(self, game_id: GameId, tag_id: TagId) -> None:
        stmt = insert(game_tags_table).values(game_id=game_id, tag_id=tag_id)
        await self._write(stmt)

    async def find_platforms(self, game_id: GameId) -> list[Platform]:
        stmt = (
            select(platforms_table)
            .select_from(
                platforms_table.join(
                    game_platforms_table,
                    platforms_table.c.id == game_platforms_table.c.platform_id,
                )
            )
            .where(game_platforms_table.c.game_id == game_id)
            .order_by(platforms_table.c.name)
        )
        return await self._fetch_all(stmt, row_to_platform)

    async def find_tags(self, game_id: GameId) -> list[Tag]:
        stmt = (
            select(tags_table)
            .select_from(
                tags_table.join(game_tags_table, tags_table.c.id == game_tags_table.c.tag_id)
            )
            .where(game_tags_table.c.game_id == game_id)
            .order_by(tags_table.c.name)
        )
        return await self._fetch_all(stmt, row_to_tag)


class PostgresPlatformRepository(PostgresRepository, PlatformRepository):
    """PostgreSQL implementation of PlatformRepository."""

    async def find_all(self) -> list[Platform]:
        stmt = select(platforms_table).order_by(platforms_table.c.name)
        return await self._fetch_all(stmt, row_to_platform)

    async def find_by_name(self, name: TagName) -> Optional[Platform]:
        stmt = select(platforms_table).where(platforms_table.c.name == name.root)
        return await self._fetch_one(stmt, row_to_platform)

    async def save(self, platform: Platform) -> Platform:
        stmt = insert(platforms_table).values(**model_to_dict(platform))
        await self._write(stmt)
        return platform


class PostgresTagRepository(PostgresRepository, TagRepository):
    """PostgreSQL implementation of TagRepository."""

    async def find_all(self) -> list[Tag]:
        stmt = select(tags_table).order_by(tags_table.c.category, tags_table.c.name)
        return await self._fetch_all(stmt, row_to_tag)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        return await self._fetch_one(stmt, row_to_tag)

    async def save(self, tag: Tag) -> Tag:
        stmt = insert(tags_table).values(**model_to_dict(tag))
        await self._write(stmt)
        return tag
